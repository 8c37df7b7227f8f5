"""
Value Tree Walker

Reaches every length under a declaration's value and hands it to
`riconv.convert`. Returns a rewritten tree; input nodes are never touched.

Dispatch order for one value:
    1. Call: convert every argument independently (name is kept)
    2. RawText of a comma-group property: convert each comma group,
       rejoin with ", "
    3. RawText: tokenize and convert the whole text
    4. ValueList: recurse into each item with this same order
       Dimension: convert value and unit symbol together
"""
from __future__ import annotations

import re
from dataclasses import replace
from typing import AbstractSet, List, Optional, Tuple

from riconv.config import Options
from riconv.convert import convert_scalar, convert_token
from riconv.model import COMMA_GROUP_PROPERTIES
from riconv.nodes import Call, Dimension, Node, RawText, ValueList


# A number with optional suffix, or any other run that is neither space nor "!"
# (a leading run of "!" is kept so `!important` stays one token)
_TOKEN_RE = re.compile(r"(?:\d+\.?\d*|\.\d+)[^\s.!]*|!*[^\s!]+")


def tokenize(text: str) -> List[str]:
    """Split text into length tokens and inert tokens, in source order."""
    return _TOKEN_RE.findall(text)


def convert_text(text: str, options: Options) -> Optional[str]:
    """
    Convert every token of `text` and rejoin them with single spaces.

    Returns:
        Converted text, or None if the text holds no tokens
    """
    tokens = tokenize(text)
    if not tokens:
        return None
    return " ".join(convert_token(token, options) for token in tokens)


def convert_value(
    node: Node,
    property_name: str,
    options: Options,
    comma_properties: AbstractSet[str] = COMMA_GROUP_PROPERTIES,
) -> Node:
    """
    Convert all lengths under one value node.

    Args:
        node: Value node to convert
        property_name: Name of the declaration the value belongs to
        options: Conversion options
        comma_properties: Properties whose text holds comma-separated groups

    Returns:
        A node of the same kind with converted lengths (the input node
        itself when nothing changed)

    Raises:
        ValueConversionError: If a length token cannot be parsed
    """
    if isinstance(node, Call):
        args = tuple(convert_value(arg, property_name, options, comma_properties) for arg in node.args)
        return node if _same_children(args, node.args) else replace(node, args=args)

    if isinstance(node, RawText):
        if property_name in comma_properties:
            groups = [convert_text(group, options) or group.strip() for group in node.value.split(",")]
            converted = ", ".join(groups)
        else:
            converted = convert_text(node.value, options)
        return node if converted is None or converted == node.value else RawText(converted)

    if isinstance(node, ValueList):
        items = tuple(convert_value(item, property_name, options, comma_properties) for item in node.items)
        return node if _same_children(items, node.items) else replace(node, items=items)

    if isinstance(node, Dimension):
        return _convert_dimension(node, options)

    raise TypeError(f"Unsupported value node type: {type(node)}")


def _same_children(converted: Tuple[Node, ...], original: Tuple[Node, ...]) -> bool:
    return all(new is old for new, old in zip(converted, original))


def _convert_dimension(node: Dimension, options: Options) -> Dimension:
    symbol = node.unit.symbol
    if symbol is None:
        # Unitless numbers (line-height, z-index) carry nothing to convert
        return node

    result = convert_scalar(node.value, symbol, options)
    if result.value == node.value and result.unit == symbol:
        return node
    return Dimension(result.value, node.unit.with_symbol(result.unit))
