"""
Refund commit sink interface
"""

from abc import ABC, abstractmethod

from ..models import RefundCommit


class IRefundCommitSink(ABC):
    """Interface for handing a refund commit to the order system"""

    @abstractmethod
    async def commit(self, refund: RefundCommit) -> str:
        """
        Record a refund in the order system

        Args:
            refund: Reconciled refund commit

        Returns:
            Reference id of the created refund

        Raises:
            UpstreamRejectedError: the order system refused the refund; its
                messages are carried verbatim in ``reasons``
        """
        pass
