from __future__ import annotations

"""
Inlining Decision Data Models.

Defines the immutable record of a single inlining outcome and the
ephemeral call-site node used when the log is folded into a tree.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional

from inlining_log.domain.errors import MissingPositionError
from inlining_log.domain.positions import PositionChain

if TYPE_CHECKING:
    from inlining_log.core.decision_log import InliningLog

POSITIVE_OUTCOME = "inline"
NEGATIVE_OUTCOME = "do not inline"

# -----------------------------------------------------------------------------
# DECISION RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Decision:
    """
    One logged inlining outcome at a specific call site.

    Attributes:
        positive: True when the callee was inlined.
        reason: Justification supplied by the inlining policy.
        phase: Name of the optimization phase that decided.
        position: Call site, relative to the log that owns this record.
        child_log: Decisions taken while processing the inlined callee.
    """
    positive: bool
    reason: str
    phase: str
    position: PositionChain
    child_log: Optional["InliningLog"] = None

    def __post_init__(self) -> None:
        if self.position is None:
            raise MissingPositionError(self.reason, self.phase)

    def is_positive(self) -> bool:
        return self.positive

    @property
    def outcome(self) -> str:
        return POSITIVE_OUTCOME if self.positive else NEGATIVE_OUTCOME

# -----------------------------------------------------------------------------
# CALL-SITE TREE
# -----------------------------------------------------------------------------

@dataclass
class CallsiteNode:
    """
    A node of the call-site tree built from a decision log.

    Attributes:
        position: Absolute position of the first decision that reached this
            node, or None for the synthetic root.
        decision: Label of the last decision logged here, if any.
        children: Child nodes keyed by their head-only position.
    """
    position: Optional[PositionChain]
    decision: Optional[str] = None
    children: Dict[PositionChain, "CallsiteNode"] = field(default_factory=dict)

    def get_or_create_child(self, position: PositionChain) -> "CallsiteNode":
        key = position.without_caller()
        child = self.children.get(key)
        if child is None:
            child = CallsiteNode(position)
            self.children[key] = child
        return child
