from __future__ import annotations

"""
Unit tests for the Decision List Renderer.
"""

from inlining_log.core.analysis.list_renderer import (
    extend_phase_stack,
    render_decision_list,
)
from inlining_log.core.decision_log import InliningLog


def _headers(lines):
    return [line for line in lines if line.startswith("<")]


def test_extend_phase_stack():
    assert extend_phase_stack("", "inlining") == "inlining"
    assert extend_phase_stack("inlining", "inlining") == "inlining-inlining"
    assert extend_phase_stack("a-b", "c") == "a-b-c"


def test_one_header_per_decision_across_nesting(make_position):
    """Headers follow append order, depth-first through nested logs."""
    grandchild = InliningLog()
    grandchild.add_decision(False, "recursive", "late", make_position("C.m", 3))

    child = InliningLog()
    child.add_decision(True, "small", "inlining", make_position("B.m", 2), grandchild)
    child.add_decision(False, "cold", "inlining", make_position("B.m", 9))

    root = InliningLog()
    root.add_decision(True, "trivial", "inlining", make_position("A.m", 1), child)
    root.add_decision(False, "native", "inlining", make_position("A.m", 4))

    lines = []
    render_decision_list(root.decisions, lines)

    assert _headers(lines) == [
        "<inlining> inline: trivial",
        "<inlining-inlining> inline: small",
        "<inlining-inlining-late> do not inline: recursive",
        "<inlining-inlining> do not inline: cold",
        "<inlining> do not inline: native",
    ]


def test_prints_relative_position_indented(make_position):
    """Nested decisions show their own frame, not the absolute chain."""
    child = InliningLog()
    child.add_decision(
        False, "too big", "inline",
        make_position("C.m", 7, caller=make_position("B.m", 3)),
    )
    root = InliningLog()
    root.add_decision(True, "trivial", "inline", make_position("A.m", 1), child)

    lines = []
    render_decision_list(root.decisions, lines)

    assert lines == [
        "<inline> inline: trivial",
        "  at A.m [bci: 1]",
        "<inline-inline> do not inline: too big",
        "  at C.m [bci: 7]",
        "  at B.m [bci: 3]",
    ]
