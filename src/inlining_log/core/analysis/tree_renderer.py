from __future__ import annotations

"""
Call-Site Tree Renderer.

Converts a built call-site tree into indented text. Ancestry is implied by
depth, so each node prints only its own head position.
"""

from typing import List

from inlining_log.domain.decision_models import CallsiteNode

ROOT_MARKER = "<root>"
LABEL_SEPARATOR = "; "
INDENT_UNIT = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_callsite_tree(node: CallsiteNode, lines: List[str], indent: str = "") -> None:
    """
    Recursively transform the call-site tree into a list of strings.

    Children are visited by instruction offset, then disambiguation id.
    Intermediate nodes that never received a decision print an empty label.

    Args:
        node: Current tree node to process.
        lines: Accumulator list for output strings.
        indent: Indentation prefix for the current recursion level.
    """
    position = str(node.position.without_caller()) if node.position is not None else ROOT_MARKER
    decision = node.decision if node.decision is not None else ""
    lines.append(f"{indent}{position}{LABEL_SEPARATOR}{decision}")

    child_indent = indent + INDENT_UNIT
    for _, child in sorted(node.children.items(), key=lambda entry: entry[0]):
        render_callsite_tree(child, lines, indent=child_indent)
