"""
Serialization helpers for value nodes, declarations and stylesheets.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This is the boundary a host pipeline uses to hand trees to the command line.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping

import yaml

from riconv.model import Declaration, Ruleset, Stylesheet
from riconv.nodes import Call, Dimension, Node, RawText, Unit, ValueList


def unit_to_dict(u: Unit) -> Dict[str, Any]:
    return {
        "numerator": list(u.numerator),
        "denominator": list(u.denominator),
        "backup_unit": u.backup_unit,
    }


def unit_from_dict(d: Dict[str, Any] | str | None) -> Unit:
    if d is None:
        return Unit()
    # Shorthand: "px"
    if isinstance(d, str):
        return Unit((d,))
    return Unit(
        numerator=tuple(d.get("numerator", ())),
        denominator=tuple(d.get("denominator", ())),
        backup_unit=d.get("backup_unit"),
    )


def node_to_dict(node: Node) -> Dict[str, Any]:
    if isinstance(node, Dimension):
        return {"type": "dimension", "value": node.value, "unit": unit_to_dict(node.unit)}
    if isinstance(node, ValueList):
        return {
            "type": "list",
            "items": [node_to_dict(item) for item in node.items],
            "separator": node.separator,
        }
    if isinstance(node, Call):
        return {"type": "call", "name": node.name, "args": [node_to_dict(arg) for arg in node.args]}
    if isinstance(node, RawText):
        return {"type": "text", "value": node.value}
    raise TypeError(f"Unsupported value node type: {type(node)}")


def node_from_dict(d: Any) -> Node:
    # Plain strings stand for raw text
    if isinstance(d, str):
        return RawText(d)
    t = d.get("type")
    if t == "dimension":
        return Dimension(value=d["value"], unit=unit_from_dict(d.get("unit")))
    if t == "list":
        return ValueList(
            items=tuple(node_from_dict(item) for item in d.get("items", [])),
            separator=d.get("separator", " "),
        )
    if t == "call":
        return Call(name=d["name"], args=tuple(node_from_dict(arg) for arg in d.get("args", [])))
    if t == "text":
        return RawText(d["value"])
    raise TypeError(f"Unsupported value node dict type: {t}")


def declaration_to_dict(decl: Declaration) -> Dict[str, Any]:
    d = {"name": decl.name, "value": node_to_dict(decl.value)}
    if decl.inline:
        d["inline"] = True
    return d


def declaration_from_dict(d: Dict[str, Any]) -> Declaration:
    return Declaration(name=d["name"], value=node_from_dict(d["value"]), inline=d.get("inline", False))


def ruleset_to_dict(r: Ruleset) -> Dict[str, Any]:
    return {
        "selector": r.selector,
        "declarations": [declaration_to_dict(decl) for decl in r.declarations],
        "rulesets": [ruleset_to_dict(child) for child in r.rulesets],
    }


def ruleset_from_dict(d: Dict[str, Any]) -> Ruleset:
    return Ruleset(
        selector=d["selector"],
        declarations=[declaration_from_dict(decl) for decl in d.get("declarations", [])],
        rulesets=[ruleset_from_dict(child) for child in d.get("rulesets", [])],
    )


def stylesheet_to_dict(s: Stylesheet) -> Dict[str, Any]:
    return {"name": s.name, "rulesets": [ruleset_to_dict(r) for r in s.rulesets]}


def stylesheet_from_dict(d: Dict[str, Any]) -> Stylesheet:
    if not isinstance(d, Mapping):
        raise TypeError(f"Stylesheet must be a mapping, got {type(d).__name__}")
    return Stylesheet(
        name=d.get("name", ""),
        rulesets=[ruleset_from_dict(r) for r in d.get("rulesets", [])],
    )


def stylesheet_to_json(s: Stylesheet) -> str:
    return json.dumps(stylesheet_to_dict(s), sort_keys=True)


def stylesheet_from_json(s: str) -> Stylesheet:
    d = json.loads(s)
    return stylesheet_from_dict(d)


def stylesheet_to_yaml(s: Stylesheet) -> str:
    return yaml.safe_dump(stylesheet_to_dict(s), sort_keys=False)


def stylesheet_from_yaml(s: str) -> Stylesheet:
    d = yaml.safe_load(s)
    return stylesheet_from_dict(d or {})
