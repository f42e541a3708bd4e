"""
Main application for the vendor refunds service
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from vendor_refunds.core.config.settings import settings
from vendor_refunds.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    EmptyRefundError,
    InvalidQuantityError,
    MalformedDataError,
    NotFoundError,
    ShopifyAPIError,
    UpstreamRejectedError,
    VendorRefundsException,
)
from vendor_refunds.core.logging import LoggingConfig, get_logger, setup_logging
from vendor_refunds.domains.orders.services import OrderAccessService, VendorDirectory
from vendor_refunds.domains.shopify.services import ShopifyOrderGateway
from vendor_refunds.api.v1.orders import router as orders_router

logger = get_logger(__name__)

# Forbidden must never collapse into not-found
STATUS_CODES = {
    NotFoundError: 404,
    AuthorizationError: 403,
    InvalidQuantityError: 422,
    EmptyRefundError: 422,
    UpstreamRejectedError: 409,
    MalformedDataError: 502,
    ShopifyAPIError: 502,
    ConfigurationError: 500,
}


def status_code_for(exc: VendorRefundsException) -> int:
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


def build_default_service() -> OrderAccessService:
    """Wire the service against configured Shopify and vendor settings"""
    gateway = ShopifyOrderGateway()
    return OrderAccessService(
        directory=VendorDirectory(settings.vendors.VENDOR_STAFF_MAPPING),
        order_source=gateway,
        refund_sink=gateway,
    )


def create_app(service: Optional[OrderAccessService] = None) -> FastAPI:
    """Create the FastAPI app; tests pass their own service"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        setup_logging(LoggingConfig.from_settings(settings.logging))
        logger.info("Starting vendor refunds service", environment=settings.ENVIRONMENT)
        gateway = app.state.order_access_service.order_source
        yield
        if isinstance(gateway, ShopifyOrderGateway):
            await gateway.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Vendor-scoped order views and partial refunds",
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.order_access_service = service or build_default_service()

    @app.exception_handler(VendorRefundsException)
    async def handle_domain_error(request: Request, exc: VendorRefundsException):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(
                "Request failed",
                path=request.url.path,
                error_code=exc.error_code,
                error=exc.message,
            )
        return JSONResponse(
            status_code=status_code,
            content={
                "error_code": exc.error_code,
                "message": exc.message,
                "reasons": exc.reasons,
            },
        )

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": settings.VERSION}

    app.include_router(orders_router)
    return app


if __name__ == "__main__":
    uvicorn.run(
        "vendor_refunds.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info" if not settings.DEBUG else "debug",
        log_config=None,
    )
