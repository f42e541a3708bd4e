"""
Refund attempt state machine

Draft -> Validating -> Validated -> Reconciled -> Submitted -> Succeeded
Validating | Validated -> Invalid
Submitted -> Rejected

Invalid and Rejected end the attempt, not the session: the caller may
edit the draft and start a new attempt from Draft.
"""

from typing import Dict, FrozenSet, List, Optional

from .refund import RefundStatus

TRANSITIONS: Dict[RefundStatus, FrozenSet[RefundStatus]] = {
    RefundStatus.DRAFT: frozenset({RefundStatus.VALIDATING}),
    RefundStatus.VALIDATING: frozenset({RefundStatus.VALIDATED, RefundStatus.INVALID}),
    RefundStatus.VALIDATED: frozenset({RefundStatus.RECONCILED, RefundStatus.INVALID}),
    RefundStatus.RECONCILED: frozenset({RefundStatus.SUBMITTED}),
    RefundStatus.SUBMITTED: frozenset({RefundStatus.SUCCEEDED, RefundStatus.REJECTED}),
    RefundStatus.SUCCEEDED: frozenset(),
    RefundStatus.REJECTED: frozenset({RefundStatus.DRAFT}),
    RefundStatus.INVALID: frozenset({RefundStatus.DRAFT}),
}

TERMINAL_STATES = frozenset(
    {RefundStatus.SUCCEEDED, RefundStatus.REJECTED, RefundStatus.INVALID}
)


class IllegalTransitionError(RuntimeError):
    """Raised on a lifecycle transition the state machine does not allow"""


class RefundLifecycle:
    """Tracks one refund attempt through its states"""

    def __init__(self, order_id: str, status: RefundStatus = RefundStatus.DRAFT):
        self.order_id = order_id
        self.status = status
        self.history: List[RefundStatus] = [status]

    def can_advance(self, target: RefundStatus) -> bool:
        return target in TRANSITIONS[self.status]

    def advance(self, target: RefundStatus) -> RefundStatus:
        if not self.can_advance(target):
            raise IllegalTransitionError(
                f"Refund for order {self.order_id} cannot move from "
                f"{self.status.value} to {target.value}"
            )
        self.status = target
        self.history.append(target)
        return target

    def retry(self) -> RefundStatus:
        """Return a failed attempt to Draft for correction"""
        return self.advance(RefundStatus.DRAFT)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    @property
    def last_terminal(self) -> Optional[RefundStatus]:
        for status in reversed(self.history):
            if status in TERMINAL_STATES:
                return status
        return None
