from __future__ import annotations

"""
Inlining Log Error Types.

Failures raised by the decision log. Only a missing call-site position is
treated as an error; every other operation on the log is total.
"""


class InliningLogError(ValueError):
    """Base class for errors raised by the inlining decision log."""


class MissingPositionError(InliningLogError):
    """
    Raised when a decision is recorded without a call-site position.

    Every decision must be anchored to a concrete call site, so this signals
    a programming error in the caller rather than a recoverable condition.
    """

    def __init__(self, reason: str = "", phase: str = "") -> None:
        self.reason = reason
        self.phase = phase
        super().__init__(
            f"Inlining decision '{reason}' from phase '{phase}' has no call-site position."
        )
