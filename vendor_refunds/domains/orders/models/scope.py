"""
Principal and effective scope models
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """Authenticated staff identity. Only the email is trusted."""

    email: Optional[str] = None


class ScopeSource(str, Enum):
    """Where an effective scope came from"""

    ADMINISTRATOR = "administrator"
    ADMIN_FILTER = "admin_filter"
    STAFF_ASSIGNMENT = "staff_assignment"


@dataclass(frozen=True)
class EffectiveScope:
    """
    The vendor a request may see, or None for unrestricted.

    Build instances with ``unrestricted()`` or ``restricted_to()``.
    """

    vendor: Optional[str] = None
    source: ScopeSource = ScopeSource.ADMINISTRATOR

    def __post_init__(self):
        if self.vendor is None and self.source != ScopeSource.ADMINISTRATOR:
            raise ValueError("a restricted scope needs a vendor")
        if self.vendor is not None and self.source == ScopeSource.ADMINISTRATOR:
            raise ValueError("an unrestricted scope cannot carry a vendor")

    @classmethod
    def unrestricted(cls) -> "EffectiveScope":
        return cls(vendor=None, source=ScopeSource.ADMINISTRATOR)

    @classmethod
    def restricted_to(
        cls, vendor: str, source: ScopeSource = ScopeSource.STAFF_ASSIGNMENT
    ) -> "EffectiveScope":
        return cls(vendor=vendor, source=source)

    @property
    def is_restricted(self) -> bool:
        return self.vendor is not None

    @property
    def is_assigned(self) -> bool:
        """True when the restriction comes from a staff assignment"""
        return self.source == ScopeSource.STAFF_ASSIGNMENT

    def permits(self, vendor: Optional[str]) -> bool:
        if not self.is_restricted:
            return True
        return vendor is not None and vendor == self.vendor

    def __str__(self) -> str:
        if not self.is_restricted:
            return "unrestricted"
        return f"restricted_to({self.vendor})"
