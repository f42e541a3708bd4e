"""
Vendor assignment store interface
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class IVendorAssignmentStore(ABC):
    """Read-only lookup of staff email -> assigned vendor"""

    @abstractmethod
    def get(self, email: str) -> Optional[str]:
        """
        Get the vendor assigned to a staff email

        Args:
            email: Normalized staff email

        Returns:
            Vendor name, or None when the email has no assignment
        """
        pass

    @abstractmethod
    def vendors(self) -> Iterable[str]:
        """Vendor names of every assignment, duplicates allowed"""
        pass
