from __future__ import annotations

"""
Call-Site Tree Builder.

Folds a decision log, including every nested log, into a single call-site
tree keyed by true call-site ancestry. Positions logged relative to a
callee are made absolute by attaching the caller chain accumulated so far.
"""

import logging
from typing import Optional, Sequence

from inlining_log.core.analysis.list_renderer import extend_phase_stack, format_decision_header
from inlining_log.domain.decision_models import CallsiteNode, Decision
from inlining_log.domain.positions import PositionChain

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_callsite_tree(decisions: Sequence[Decision]) -> CallsiteNode:
    """
    Build a fresh call-site tree from the records of a root log.

    Args:
        decisions: Records of the root log, in append order.

    Returns:
        CallsiteNode: Synthetic root holding no position.
    """
    root = CallsiteNode(None)
    _insert_decisions(root, decisions, phase_prefix="", caller=None)
    return root


def create_callsite(root: CallsiteNode, position: PositionChain, decision: str) -> CallsiteNode:
    """
    Label the node addressed by the absolute `position`.

    Missing ancestors are created on the way down. A node that already
    carries a label is overwritten, so the last decision logged for a given
    full chain wins.
    """
    parent = _get_or_create_callsite(root, position.caller)
    callsite = parent.get_or_create_child(position)
    if callsite.decision is not None:
        logger.debug(f"Overwriting decision at {position.without_caller()!s}: {callsite.decision}")
    callsite.decision = decision
    return callsite

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _insert_decisions(
        root: CallsiteNode,
        decisions: Sequence[Decision],
        phase_prefix: str,
        caller: Optional[PositionChain],
) -> None:
    for decision in decisions:
        phase_stack = extend_phase_stack(phase_prefix, decision.phase)
        absolute_position = decision.position.add_caller(caller)
        create_callsite(root, absolute_position, format_decision_header(phase_stack, decision))
        if decision.child_log is not None:
            _insert_decisions(root, decision.child_log.decisions, phase_stack, absolute_position)


def _get_or_create_callsite(root: CallsiteNode, position: Optional[PositionChain]) -> CallsiteNode:
    if position is None:
        return root
    parent = _get_or_create_callsite(root, position.caller)
    return parent.get_or_create_child(position)
