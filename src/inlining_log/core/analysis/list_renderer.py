from __future__ import annotations

"""
Decision List Renderer.

Flattens a decision log and its nested logs into a chronological text
report. Each decision becomes a header line with its phase stack and
outcome, followed by its relative position indented by two spaces.
"""

from typing import List, Optional, Sequence

from inlining_log.domain.decision_models import Decision
from inlining_log.domain.positions import PositionChain

POSITION_INDENT = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_decision_list(
        decisions: Sequence[Decision],
        lines: List[str],
        phase_prefix: str = "",
        caller: Optional[PositionChain] = None,
) -> None:
    """
    Recursively append the list report for `decisions` to `lines`.

    Nested logs are visited depth-first, right after the decision that owns
    them, so the output follows append order at every nesting level.

    Args:
        decisions: Records of the log being rendered, in append order.
        lines: Accumulator list for output strings.
        phase_prefix: Phase stack of the enclosing decisions ("" at the root).
        caller: Absolute position of the enclosing call site, if nested.
    """
    for decision in decisions:
        phase_stack = extend_phase_stack(phase_prefix, decision.phase)
        absolute_position = decision.position.add_caller(caller)

        lines.append(format_decision_header(phase_stack, decision))
        for frame_line in str(decision.position).split("\n"):
            lines.append(f"{POSITION_INDENT}{frame_line}")

        if decision.child_log is not None:
            render_decision_list(
                decision.child_log.decisions,
                lines,
                phase_prefix=phase_stack,
                caller=absolute_position,
            )

# -----------------------------------------------------------------------------
# SHARED FORMATTING HELPERS
# -----------------------------------------------------------------------------

def extend_phase_stack(phase_prefix: str, phase: str) -> str:
    """Join the enclosing phase stack and `phase` with a hyphen."""
    return phase if phase_prefix == "" else f"{phase_prefix}-{phase}"


def format_decision_header(phase_stack: str, decision: Decision) -> str:
    return f"<{phase_stack}> {decision.outcome}: {decision.reason}"
