"""
Shopify domain: Admin GraphQL adapters for orders and refunds
"""
