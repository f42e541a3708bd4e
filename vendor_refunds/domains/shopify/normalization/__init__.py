from .graphql_orders import GraphQLOrderAdapter
from .refund_mutation import build_refund_create_variables

__all__ = ["GraphQLOrderAdapter", "build_refund_create_variables"]
