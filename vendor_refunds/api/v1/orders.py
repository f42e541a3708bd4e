"""
API endpoints for vendor-scoped orders and refunds
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from vendor_refunds.core.dependencies import (
    get_order_access_service,
    get_principal,
    get_vendor_directory,
)
from vendor_refunds.core.logging import get_logger
from vendor_refunds.domains.orders.models import Principal, RefundStatus
from vendor_refunds.domains.orders.services import OrderAccessService, VendorDirectory

logger = get_logger(__name__)
router = APIRouter(prefix="/api/v1", tags=["orders"])


class RefundRequestBody(BaseModel):
    """Refund draft as posted by the dashboard"""

    quantities: Dict[str, Any] = Field(
        default_factory=dict, description="Line item ID -> quantity to refund"
    )
    note: Optional[str] = Field(None, description="Refund note")


def _scoped_order_response(scoped) -> Dict[str, Any]:
    data = scoped.model_dump(mode="json")
    data["formatted_subtotal"] = scoped.formatted_subtotal
    data["effective_vendor"] = scoped.scope.vendor
    return data


@router.get("/orders")
async def list_orders(
    vendor: Optional[str] = Query(None, description="Vendor filter (administrators only)"),
    limit: Optional[int] = Query(None, ge=1, le=250, description="Number of orders"),
    principal: Principal = Depends(get_principal),
    service: OrderAccessService = Depends(get_order_access_service),
):
    """Recent orders, counted within the caller's vendor scope"""
    summaries = await service.list_scoped_orders(principal, vendor, limit)
    return {"orders": [summary.model_dump(mode="json") for summary in summaries]}


@router.get("/orders/{order_id:path}")
async def get_order(
    order_id: str,
    vendor: Optional[str] = Query(None, description="Vendor filter (administrators only)"),
    principal: Principal = Depends(get_principal),
    service: OrderAccessService = Depends(get_order_access_service),
):
    """Order detail with only the line items the caller may see"""
    scoped = await service.get_scoped_order(order_id, principal, vendor)
    return _scoped_order_response(scoped)


@router.post("/orders/{order_id:path}/refunds")
async def create_refund(
    order_id: str,
    body: RefundRequestBody,
    principal: Principal = Depends(get_principal),
    service: OrderAccessService = Depends(get_order_access_service),
):
    """Submit a partial refund; the order is re-fetched before validation"""
    outcome = await service.submit_refund(order_id, principal, body.quantities, body.note)

    if outcome.status == RefundStatus.SUCCEEDED:
        status_code = 200
    elif outcome.status == RefundStatus.REJECTED:
        status_code = 409
    else:
        status_code = 422
    return JSONResponse(status_code=status_code, content=outcome.to_dict())


@router.get("/vendors")
async def list_vendors(
    principal: Principal = Depends(get_principal),
    directory: VendorDirectory = Depends(get_vendor_directory),
) -> Dict[str, List[str]]:
    """Vendor names for the filter picker; assigned staff only see their own"""
    assigned_vendor = directory.resolve(principal.email)
    if assigned_vendor:
        return {"vendors": [assigned_vendor]}
    return {"vendors": directory.all_vendors()}
