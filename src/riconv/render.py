"""
Render value nodes back to stylesheet text.

Used by `riconv --format css` and for inspection; host pipelines use
their own code generation.
"""
from typing import List

from riconv.convert import format_number
from riconv.model import Declaration, Ruleset, Stylesheet
from riconv.nodes import Call, Dimension, Node, RawText, Unit, ValueList


def render_unit(unit: Unit) -> str:
    numerator = "*".join(s for s in unit.numerator if s) or (unit.backup_unit or "")
    if not unit.denominator:
        return numerator
    return numerator + "/" + "/".join(unit.denominator)


def render_value(node: Node) -> str:
    """Convert a value node to its textual form."""
    if isinstance(node, Dimension):
        return format_number(node.value) + render_unit(node.unit)

    if isinstance(node, ValueList):
        return node.separator.join(render_value(item) for item in node.items)

    if isinstance(node, Call):
        return f"{node.name}({', '.join(render_value(arg) for arg in node.args)})"

    if isinstance(node, RawText):
        return node.value

    raise TypeError(f"Unsupported value node type: {type(node)}")


def render_declaration(declaration: Declaration) -> str:
    return f"{declaration.name}: {render_value(declaration.value)};"


def render_ruleset(ruleset: Ruleset) -> List[str]:
    """
    Render a ruleset as CSS blocks, one per selector.

    Nested rulesets carry their full selector, so they follow their parent
    as separate blocks. Selectors without declarations produce no block.
    """
    blocks = []
    if ruleset.declarations:
        body = "".join(f"  {render_declaration(d)}\n" for d in ruleset.declarations)
        blocks.append(f"{ruleset.selector} {{\n{body}}}\n")
    for child in ruleset.rulesets:
        blocks.extend(render_ruleset(child))
    return blocks


def render_stylesheet(stylesheet: Stylesheet) -> str:
    blocks = [block for ruleset in stylesheet.rulesets for block in render_ruleset(ruleset)]
    return "\n".join(blocks)
