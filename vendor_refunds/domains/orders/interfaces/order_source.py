"""
Order data source interface
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Order


class IOrderSource(ABC):
    """Interface for reading authoritative orders from the order system"""

    @abstractmethod
    async def get_order(self, order_id: str) -> Optional[Order]:
        """
        Fetch one order with all of its line items

        Args:
            order_id: Numeric order id or global id

        Returns:
            The order, or None when the order system does not know the id
        """
        pass

    @abstractmethod
    async def list_orders(self, limit: Optional[int] = None) -> List[Order]:
        """
        Fetch the most recent orders with their line items

        Args:
            limit: Maximum number of orders

        Returns:
            Orders, newest first
        """
        pass
