from __future__ import annotations

"""
Call-Site Position Models.

Defines the source location value consumed from the compiler and the
immutable, caller-linked position chain used to identify a call site across
nested inlining. Chains are never mutated: derived chains reuse existing
nodes as their tails.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

# -----------------------------------------------------------------------------
# SOURCE LOCATIONS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceLocation:
    """
    A method plus an instruction offset inside it.

    Attributes:
        method: Printable identity of the compiled method.
        bci: Instruction (bytecode) offset within the method.
    """
    method: str
    bci: int

    def __str__(self) -> str:
        return f"at {self.method} [bci: {self.bci}]"

# -----------------------------------------------------------------------------
# POSITION CHAINS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PositionChain:
    """
    A call site nested inside the chain of its enclosing call sites.

    Equality and hashing cover the whole chain: location, id and,
    transitively, every caller. Ordering only looks at the head and sorts by
    instruction offset, then by id.

    Attributes:
        caller: Immediately enclosing call site, or None at top level.
        location: Source location of this call site.
        id: Disambiguates identical locations from separate inlining attempts.
    """
    caller: Optional["PositionChain"]
    location: Any
    id: int = 0

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_position(cls, position: Any, id: int = 0) -> "PositionChain":
        """
        Convert a caller-linked position without ids into a chain.

        The head receives `id`; every converted caller receives id 0.

        Args:
            position: Object exposing `method`, `bci` and `caller`.
            id: Disambiguation id for the head node.

        Returns:
            PositionChain: Equivalent chain with ids attached.
        """
        return cls(
            _convert_caller(getattr(position, "caller", None)),
            SourceLocation(position.method, position.bci),
            id,
        )

    # -------------------------------------------------------------------------
    # Derivations
    # -------------------------------------------------------------------------

    def add_caller(self, caller: Optional["PositionChain"]) -> "PositionChain":
        """
        Attach `caller` above the outermost node of this chain.

        Translates a position relative to a nested log's frame into one that
        is absolute with respect to the root compilation.
        """
        if self.caller is None:
            return PositionChain(caller, self.location, self.id)
        return PositionChain(self.caller.add_caller(caller), self.location, self.id)

    def without_caller(self) -> "PositionChain":
        return PositionChain(None, self.location, self.id)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def bci(self) -> int:
        return self.location.bci

    @property
    def method(self) -> Any:
        return getattr(self.location, "method", None)

    @property
    def depth(self) -> int:
        """Number of enclosing call sites (0 for a top-level site)."""
        return 0 if self.caller is None else self.caller.depth + 1

    def get_id(self) -> int:
        return self.id

    def frames(self) -> Iterator["PositionChain"]:
        """Yield this node and then each caller, innermost first."""
        node: Optional[PositionChain] = self
        while node is not None:
            yield node
            node = node.caller

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def compare_to(self, other: "PositionChain") -> int:
        diff = self.bci - other.bci
        if diff != 0:
            return diff
        return self.id - other.id

    def __lt__(self, other: "PositionChain") -> bool:
        if not isinstance(other, PositionChain):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: "PositionChain") -> bool:
        if not isinstance(other, PositionChain):
            return NotImplemented
        return self.compare_to(other) > 0

    def __le__(self, other: "PositionChain") -> bool:
        if not isinstance(other, PositionChain):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __ge__(self, other: "PositionChain") -> bool:
        if not isinstance(other, PositionChain):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        lines: List[str] = [str(frame.location) for frame in self.frames()]
        return "\n".join(lines)


def _convert_caller(position: Any) -> Optional[PositionChain]:
    if position is None:
        return None
    return PositionChain(
        _convert_caller(getattr(position, "caller", None)),
        SourceLocation(position.method, position.bci),
        0,
    )
