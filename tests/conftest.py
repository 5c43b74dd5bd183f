from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts the 'src' directory on the import path and provides small factories
for positions and logs shared across unit and integration tests.
"""

import os
import sys
from typing import Callable, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from inlining_log.core.decision_log import InliningLog  # noqa: E402
from inlining_log.domain.positions import PositionChain, SourceLocation  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_position() -> Callable[..., PositionChain]:
    """
    Return a factory building a position chain node.

    Usage: make_position("Main.run", 5, id=0, caller=None).
    """
    def _make(method: str, bci: int, id: int = 0, caller: Optional[PositionChain] = None) -> PositionChain:
        return PositionChain(caller, SourceLocation(method, bci), id)

    return _make


@pytest.fixture
def example_log(make_position) -> InliningLog:
    """
    Root log that inlines Main.run@5, whose nested log rejects Helper.compute@12.
    """
    child = InliningLog()
    child.add_decision(False, "too big", "inline", make_position("Helper.compute", 12))

    root = InliningLog()
    root.add_decision(True, "trivial", "inline", make_position("Main.run", 5), child)
    return root
