"""
Staff -> vendor assignment lookup
"""

from typing import Dict, Iterable, List, Mapping, Optional, Union

from vendor_refunds.core.logging import get_logger

from ..interfaces import IVendorAssignmentStore

logger = get_logger(__name__)


def normalize_email(email: Optional[str]) -> Optional[str]:
    """Trim and case-fold an email; blank becomes None"""
    if email is None:
        return None
    normalized = email.strip().casefold()
    return normalized or None


class StaticVendorAssignmentStore(IVendorAssignmentStore):
    """Assignment store backed by an in-memory mapping (e.g. from settings)"""

    def __init__(self, mapping: Mapping[str, str]):
        self._mapping: Dict[str, str] = {}
        for email, vendor in mapping.items():
            key = normalize_email(email)
            if key is None:
                continue
            self._mapping[key] = vendor

    def get(self, email: str) -> Optional[str]:
        return self._mapping.get(email)

    def vendors(self) -> Iterable[str]:
        return list(self._mapping.values())


class VendorDirectory:
    """Resolves a principal's email to their assigned vendor.

    None means the principal has no assignment and acts as an administrator.
    The store is consulted on every call; assignments may change between
    requests.
    """

    def __init__(self, store: Union[IVendorAssignmentStore, Mapping[str, str]]):
        if isinstance(store, IVendorAssignmentStore):
            self.store = store
        else:
            self.store = StaticVendorAssignmentStore(store)

    def resolve(self, email: Optional[str]) -> Optional[str]:
        key = normalize_email(email)
        if key is None:
            return None
        vendor = self.store.get(key)
        if not vendor:
            return None
        logger.debug("Resolved vendor assignment", email=key, vendor=vendor)
        return vendor

    def is_assigned_to(self, email: Optional[str], vendor: str) -> bool:
        assigned = self.resolve(email)
        return assigned is not None and assigned == vendor

    def all_vendors(self) -> List[str]:
        """Unique vendor names in first-seen order"""
        seen: Dict[str, None] = {}
        for vendor in self.store.vendors():
            if vendor:
                seen.setdefault(vendor, None)
        return list(seen)
