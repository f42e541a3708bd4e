"""
Shopify order gateway

Implements the order source and refund sink over the Admin GraphQL API.
The refund mutation is sent exactly once; a failed money movement is never
retried automatically.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import httpx

from vendor_refunds.core.config import settings
from vendor_refunds.core.exceptions import (
    ConfigurationError,
    MalformedDataError,
    ShopifyAPIError,
    UpstreamRejectedError,
)
from vendor_refunds.core.logging import get_logger
from vendor_refunds.domains.orders.interfaces import IOrderSource, IRefundCommitSink
from vendor_refunds.domains.orders.models import Order, RefundCommit
from vendor_refunds.shared.helpers import order_gid

from ..normalization import GraphQLOrderAdapter, build_refund_create_variables
from ..queries import (
    GET_ORDER_QUERY,
    LIST_ORDERS_QUERY,
    ORDER_LINE_ITEMS_QUERY,
    REFUND_CREATE_MUTATION,
)

logger = get_logger(__name__)

# Messages Shopify uses when the order id itself cannot be resolved
INVALID_ID_MESSAGE_PREFIXES = ("invalid id", "invalid global id")


class ShopifyOrderGateway(IOrderSource, IRefundCommitSink):
    """Shopify GraphQL client for orders and refunds"""

    def __init__(
        self,
        shop_domain: Optional[str] = None,
        access_token: Optional[str] = None,
        api_version: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        shopify_settings = settings.shopify
        self.shop_domain = shop_domain or shopify_settings.SHOPIFY_SHOP_DOMAIN
        self.access_token = access_token or shopify_settings.SHOPIFY_ACCESS_TOKEN
        self.api_version = api_version or shopify_settings.SHOPIFY_API_VERSION
        self.line_items_limit = shopify_settings.SHOPIFY_LINE_ITEMS_LIMIT
        self.orders_page_size = shopify_settings.SHOPIFY_ORDERS_PAGE_SIZE
        self.timeout = httpx.Timeout(shopify_settings.SHOPIFY_REQUEST_TIMEOUT, connect=10.0)

        self.endpoint = "/admin/api/{version}/graphql.json"
        self.adapter = GraphQLOrderAdapter()

        self.http_client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        """Async context manager entry"""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    async def connect(self):
        """Initialize HTTP client"""
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
            self._owns_client = True

    async def close(self):
        """Close HTTP client"""
        if self.http_client and self._owns_client:
            await self.http_client.aclose()
            self.http_client = None

    def _get_graphql_endpoint(self) -> str:
        shop_name = (
            self.shop_domain.replace(".myshopify.com", "")
            .replace("https://", "")
            .replace("http://", "")
            .strip("/")
        )
        shop_url = f"https://{shop_name}.myshopify.com"
        return urljoin(shop_url, self.endpoint.format(version=self.api_version))

    def _get_headers(self) -> Dict[str, str]:
        if not self.access_token:
            raise ConfigurationError(
                "No Shopify access token configured",
                config_key="SHOPIFY_ACCESS_TOKEN",
            )
        return {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
        }

    async def _post(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        if not self.shop_domain:
            raise ConfigurationError(
                "No Shopify shop domain configured", config_key="SHOPIFY_SHOP_DOMAIN"
            )
        await self.connect()

        try:
            response = await self.http_client.post(
                self._get_graphql_endpoint(),
                headers=self._get_headers(),
                json={"query": query, "variables": variables},
            )
        except httpx.HTTPError as e:
            logger.error("Shopify request failed", shop_domain=self.shop_domain, error=str(e))
            raise ShopifyAPIError(f"Shopify request failed: {e}", cause=e) from e

        if response.status_code != 200:
            logger.error(
                f"HTTP error: {response.status_code}",
                shop_domain=self.shop_domain,
                response_text=response.text,
            )
            raise ShopifyAPIError(
                f"Shopify returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ShopifyAPIError("Shopify returned a non-JSON body", cause=e) from e

    @staticmethod
    def _is_throttled(errors: List[Dict[str, Any]]) -> bool:
        return any(
            (error.get("extensions") or {}).get("code") == "THROTTLED" for error in errors
        )

    @staticmethod
    def _is_unknown_id(errors: List[Dict[str, Any]]) -> bool:
        """True when every error only says the order id itself is unusable"""

        def about_id(error: Dict[str, Any]) -> bool:
            message = (error.get("message") or "").lower()
            code = (error.get("extensions") or {}).get("code")
            if code == "INVALID_VARIABLE" and "$id" in message:
                return True
            return message.startswith(INVALID_ID_MESSAGE_PREFIXES)

        return all(about_id(error) for error in errors)

    async def get_order(self, order_id: str) -> Optional[Order]:
        gid = order_gid(order_id)
        result = await self._post(
            GET_ORDER_QUERY,
            {"id": gid, "lineItemsFirst": self.line_items_limit},
        )

        errors = result.get("errors") or []
        if errors:
            if self._is_throttled(errors):
                raise ShopifyAPIError("Shopify API throttled the order query", errors=errors)
            if self._is_unknown_id(errors):
                logger.info("Order id rejected by Shopify", order_id=order_id, errors=errors)
                return None
            logger.error("GraphQL errors fetching order", order_id=order_id, errors=errors)
            raise ShopifyAPIError("Failed to fetch order", errors=errors)

        payload = (result.get("data") or {}).get("order")
        if payload is None:
            return None
        await self._load_remaining_line_items(gid, payload)
        return self.adapter.to_order(payload)

    async def _load_remaining_line_items(self, gid: str, payload: Dict[str, Any]) -> None:
        """Follow lineItems pagination so the order carries every line item"""
        connection = payload.get("lineItems") or {}
        page_info = connection.get("pageInfo") or {}
        edges = list(connection.get("edges") or [])
        seen_cursors = set()

        while page_info.get("hasNextPage"):
            cursor = page_info.get("endCursor")
            if not cursor or cursor in seen_cursors:
                raise MalformedDataError(
                    f"Line item pagination of order {gid} did not advance",
                    field="lineItems.pageInfo.endCursor",
                    value=cursor,
                )
            seen_cursors.add(cursor)

            result = await self._post(
                ORDER_LINE_ITEMS_QUERY,
                {"id": gid, "lineItemsFirst": self.line_items_limit, "lineItemsAfter": cursor},
            )
            errors = result.get("errors") or []
            if errors:
                logger.error("GraphQL errors fetching line items", order_id=gid, errors=errors)
                raise ShopifyAPIError("Failed to fetch order line items", errors=errors)

            order = (result.get("data") or {}).get("order")
            if order is None:
                raise ShopifyAPIError(f"Order {gid} vanished while paging line items")
            connection = order.get("lineItems") or {}
            page_info = connection.get("pageInfo") or {}
            edges.extend(connection.get("edges") or [])

        if seen_cursors:
            logger.debug("Fetched paginated line items", order_id=gid, line_items=len(edges))
        payload["lineItems"] = {"edges": edges, "pageInfo": page_info}

    async def list_orders(self, limit: Optional[int] = None) -> List[Order]:
        result = await self._post(
            LIST_ORDERS_QUERY,
            {"first": limit or self.orders_page_size, "lineItemsFirst": self.line_items_limit},
        )

        errors = result.get("errors") or []
        if errors:
            logger.error("GraphQL errors listing orders", errors=errors)
            raise ShopifyAPIError("Failed to fetch orders", errors=errors)

        orders = []
        edges = ((result.get("data") or {}).get("orders") or {}).get("edges") or []
        for edge in edges:
            node = edge.get("node") or {}
            try:
                if node.get("id"):
                    await self._load_remaining_line_items(node["id"], node)
                orders.append(self.adapter.to_order(node))
            except MalformedDataError as e:
                logger.error(
                    "Skipping malformed order in listing",
                    order_id=node.get("id"),
                    error=e.message,
                )
        return orders

    async def commit(self, refund: RefundCommit) -> str:
        result = await self._post(
            REFUND_CREATE_MUTATION, build_refund_create_variables(refund)
        )

        errors = result.get("errors") or []
        if errors:
            logger.error("GraphQL errors creating refund", order_id=refund.order_id, errors=errors)
            raise ShopifyAPIError("Refund mutation failed", errors=errors)

        payload = (result.get("data") or {}).get("refundCreate") or {}
        user_errors = payload.get("userErrors") or []
        if user_errors:
            raise UpstreamRejectedError(
                "Shopify rejected the refund",
                reasons=[error.get("message") or "Unknown error" for error in user_errors],
                order_id=refund.order_id,
            )

        created = payload.get("refund") or {}
        if not created.get("id"):
            raise ShopifyAPIError("Refund mutation returned no refund id")
        return created["id"]
