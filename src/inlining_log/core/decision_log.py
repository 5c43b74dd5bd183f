from __future__ import annotations

"""
Inlining Decision Log.

Append-only, chronological record of the inlining decisions taken during
one compilation. A decision that inlines a callee may own a nested log with
the decisions taken while processing that callee's body.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from inlining_log.core.analysis.list_renderer import render_decision_list
from inlining_log.core.analysis.tree_builder import build_callsite_tree
from inlining_log.core.analysis.tree_renderer import render_callsite_tree
from inlining_log.domain.decision_models import Decision
from inlining_log.domain.positions import PositionChain

logger = logging.getLogger(__name__)


class InliningLog:
    """Ordered, append-only sequence of inlining decisions."""

    def __init__(self) -> None:
        self._decisions: List[Decision] = []

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def add_decision(
            self,
            positive: bool,
            reason: str,
            phase: str,
            position: Optional[PositionChain],
            child_log: Optional["InliningLog"] = None,
    ) -> Decision:
        """
        Record one decision at the end of the log.

        Args:
            positive: True when the callee is inlined.
            reason: Justification supplied by the inlining policy.
            phase: Optimization phase taking the decision.
            position: Call site, relative to this log's frame.
            child_log: Decisions taken while processing the inlined callee.

        Returns:
            Decision: The appended record.

        Raises:
            MissingPositionError: If `position` is None. Nothing is appended.
        """
        decision = Decision(positive, reason, phase, position, child_log)
        self._decisions.append(decision)
        logger.debug(
            f"[{phase}] {decision.outcome}: {reason} "
            f"({position.without_caller()!s}, id={position.id})"
        )
        return decision

    @property
    def decisions(self) -> Tuple[Decision, ...]:
        return tuple(self._decisions)

    def __len__(self) -> int:
        return len(self._decisions)

    def __iter__(self) -> Iterator[Decision]:
        return iter(tuple(self._decisions))

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def list_lines(self) -> List[str]:
        lines: List[str] = []
        render_decision_list(self._decisions, lines)
        return lines

    def tree_lines(self) -> List[str]:
        lines: List[str] = []
        render_callsite_tree(build_callsite_tree(self._decisions), lines)
        return lines

    def format_as_list(self) -> str:
        """Render every decision, depth-first through nested logs, in append order."""
        return _join_lines(self.list_lines())

    def format_as_tree(self) -> str:
        """Render all decisions merged into one call-site tree."""
        return _join_lines(self.tree_lines())


def _join_lines(lines: List[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
