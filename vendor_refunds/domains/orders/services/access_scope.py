"""
Effective scope resolution

This is the only place where the assigned vendor and a client-requested
vendor filter meet. Every entry point goes through it, and downstream code
receives the resulting EffectiveScope, never the raw filter.
"""

from typing import Optional

from vendor_refunds.core.logging import get_logger

from ..models import EffectiveScope, ScopeSource

logger = get_logger(__name__)


class AccessScopeResolver:
    """Combines a staff assignment with an optional vendor filter"""

    def resolve(
        self, assigned_vendor: Optional[str], requested_vendor: Optional[str] = None
    ) -> EffectiveScope:
        # An assignment always wins; the requested filter is not even compared
        if assigned_vendor:
            if requested_vendor and requested_vendor != assigned_vendor:
                logger.warning(
                    "Ignoring vendor filter outside staff assignment",
                    assigned_vendor=assigned_vendor,
                    requested_vendor=requested_vendor,
                )
            return EffectiveScope.restricted_to(
                assigned_vendor, ScopeSource.STAFF_ASSIGNMENT
            )

        if requested_vendor is not None and requested_vendor.strip():
            return EffectiveScope.restricted_to(
                requested_vendor.strip(), ScopeSource.ADMIN_FILTER
            )

        return EffectiveScope.unrestricted()
