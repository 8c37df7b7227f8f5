"""
Value Node System

A declaration's value is a small tree of immutable nodes. The converter
never edits a node in place: it builds a replacement of the same kind and
the caller swaps the reference.

Node kinds:
    - Dimension: number plus a separate unit descriptor (10px)
    - ValueList: ordered sequence of nodes (10px @gutter 0)
    - Call: function call with ordered arguments (translate(10px, 5px))
    - RawText: text that may encode several length tokens ("10px solid red")

ARCHITECTURAL RULE:
    Nodes are structure only.
    Conversion belongs in the walker, rendering in `riconv.render`.
"""

from abc import ABC
from dataclasses import dataclass, field
from typing import Optional, Tuple


class Node(ABC):
    """
    Base class for all value nodes.

    Exists to give the node hierarchy a common type.
    """
    pass


@dataclass(frozen=True)
class Unit:
    """
    Unit descriptor attached to a Dimension.

    Position 0 of `numerator` is authoritative. When the numerator is
    empty, `backup_unit` stands in (a unit remembered from an operand
    that was folded away upstream).

    Properties:
        numerator: Unit symbols multiplied together (usually one)
        denominator: Unit symbols divided by (usually none)
        backup_unit: Fallback symbol used when the numerator is empty
    """

    numerator: Tuple[str, ...] = ()
    denominator: Tuple[str, ...] = ()
    backup_unit: Optional[str] = None

    @property
    def symbol(self) -> Optional[str]:
        if self.numerator and self.numerator[0]:
            return self.numerator[0]
        return self.backup_unit

    def with_symbol(self, symbol: Optional[str]) -> "Unit":
        """Return a copy whose first numerator symbol is `symbol`."""
        if symbol is None:
            return self
        return Unit(
            numerator=(symbol,) + self.numerator[1:],
            denominator=self.denominator,
            backup_unit=self.backup_unit,
        )


@dataclass(frozen=True)
class Dimension(Node):
    """
    A number with a separate unit descriptor.

    Example:
        Dimension(10, Unit(("px",)))    # 10px
        Dimension(1.5, Unit())          # unitless 1.5
    """

    value: float
    unit: Unit = field(default_factory=Unit)


@dataclass(frozen=True)
class ValueList(Node):
    """
    Ordered sequence of value nodes.

    Produced when a declaration mixes literal and substituted values, e.g.
    `margin: 10px @gutter` once the variable has been resolved.

    Properties:
        items: Child nodes in source order
        separator: Text placed between items when rendered
    """

    items: Tuple[Node, ...] = ()
    separator: str = " "


@dataclass(frozen=True)
class Call(Node):
    """
    A named function call such as `translate(10px, 5px)`.

    The name is never converted; only the arguments are.
    """

    name: str
    args: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class RawText(Node):
    """
    Text that collapses values and units together.

    May hold several whitespace-separated tokens, keywords and
    `!important` markers alike.
    """

    value: str


def dimension(value: float, unit: Optional[str] = None) -> Dimension:
    """Shorthand for a Dimension with a single-symbol unit."""
    return Dimension(value, Unit((unit,)) if unit else Unit())
