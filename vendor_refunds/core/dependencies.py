from typing import Optional

from fastapi import Header, Request

from vendor_refunds.core.logging import get_logger
from vendor_refunds.shared.constants.app import PRINCIPAL_EMAIL_HEADER
from vendor_refunds.domains.orders.models import Principal
from vendor_refunds.domains.orders.services import OrderAccessService, VendorDirectory

logger = get_logger(__name__)


async def get_principal(
    x_staff_email: Optional[str] = Header(default=None, alias=PRINCIPAL_EMAIL_HEADER),
) -> Principal:
    """
    Dependency building the principal from the identity layer's header.

    Session resolution happens upstream; a missing header means a staff
    member with no associated email, which resolves to no vendor assignment.
    """
    email = x_staff_email.strip() if x_staff_email else None
    return Principal(email=email or None)


def get_order_access_service(request: Request) -> OrderAccessService:
    """Dependency returning the order access service bound at startup"""
    return request.app.state.order_access_service


def get_vendor_directory(request: Request) -> VendorDirectory:
    """Dependency returning the vendor directory bound at startup"""
    return request.app.state.order_access_service.directory
