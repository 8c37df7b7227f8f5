"""
Stylesheet Containers

Declarations and the rulesets that hold them.

These are the host-side objects handed to the engine:
    - Declaration (one property/value pair, value replaced on conversion)
    - Ruleset (selector with declarations and nested rulesets)
    - Stylesheet (root container)

Unlike value nodes these are mutable: the engine rewrites
`Declaration.value` in place and leaves everything else alone.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from .nodes import Node


# Properties whose text values may hold several comma-separated groups,
# each of which can contain lengths
COMMA_GROUP_PROPERTIES = frozenset({
    "background",
    "background-size",
    "background-position",
})


@dataclass
class Declaration:
    """
    A single `name: value` pair.

    Properties:
        name: Property name (decides whether comma grouping applies)
        value: Value node tree
        inline: Declarations marked inline are not converted
    """

    name: str
    value: Node
    inline: bool = False


@dataclass
class Ruleset:
    """
    A selector with its declarations and nested rulesets.

    Declarations come before nested rulesets in document order.
    """

    selector: str
    declarations: List[Declaration] = field(default_factory=list)
    rulesets: List["Ruleset"] = field(default_factory=list)

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield declarations depth first, in document order."""
        yield from self.declarations
        for child in self.rulesets:
            yield from child.iter_declarations()


@dataclass
class Stylesheet:
    """Root container."""

    name: str = ""
    rulesets: List[Ruleset] = field(default_factory=list)

    def iter_declarations(self) -> Iterator[Declaration]:
        for ruleset in self.rulesets:
            yield from ruleset.iter_declarations()

    def get_ruleset(self, selector: str) -> "Ruleset | None":
        """
        Retrieve a top-level ruleset by selector.

        Returns:
            Ruleset or None if not found
        """
        for ruleset in self.rulesets:
            if ruleset.selector == selector:
                return ruleset
        return None
