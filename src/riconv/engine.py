"""
Resolution-Independence Engine

Host-facing entry point. The host traversal calls `visit_declaration`
once per declaration, in document order; the engine swaps in the
converted value and hands the declaration back.

Example:
    engine = create(base_size=16)
    engine.visit_declaration(Declaration("width", dimension(32, "px")))
    # value is now Dimension(2.0, Unit(("rem",)))

Reconfigure only between traversals. Options are immutable, so
concurrent visits with one engine only read shared state.
"""
from __future__ import annotations

import logging
from typing import AbstractSet, Any, Iterable, Mapping, Optional, Union

from riconv.config import Options
from riconv.convert import ValueConversionError
from riconv.model import COMMA_GROUP_PROPERTIES, Declaration, Ruleset, Stylesheet
from riconv.walker import convert_value

logger = logging.getLogger(__name__)

OptionsLike = Union[Options, Mapping[str, Any], None]


class ResolutionIndependence:
    """
    Converts source-unit lengths of declarations into resolution-independent units.

    Properties:
        options: Current conversion Options
        comma_properties: Properties whose text values hold comma-separated groups
    """

    def __init__(
        self,
        options: OptionsLike = None,
        comma_properties: Optional[AbstractSet[str]] = None,
        **kwargs: Any,
    ):
        self.options = _coerce_options(options).configure(**kwargs)
        self.comma_properties = frozenset(
            COMMA_GROUP_PROPERTIES if comma_properties is None else comma_properties
        )

    def configure(self, options: OptionsLike = None, **kwargs: Any) -> None:
        """
        Update options; omitted fields keep their current value.

        Raises:
            ConfigurationError: If the merged options are invalid (the
                current options are kept)
        """
        if isinstance(options, Options):
            self.options = options.configure(**kwargs)
        else:
            self.options = self.options.configure(options, **kwargs)

    def visit_declaration(self, declaration: Declaration) -> Declaration:
        """
        Convert the lengths of one declaration in place.

        Inline declarations are returned unchanged.

        Raises:
            ValueConversionError: If a length cannot be converted; the
                declaration keeps its original value
        """
        if declaration.inline:
            return declaration

        try:
            converted = convert_value(
                declaration.value, declaration.name, self.options, self.comma_properties
            )
        except ValueConversionError as e:
            raise ValueConversionError(f"{declaration.name}: {e}") from e

        if converted is not declaration.value:
            logger.debug("Converted %s: %r -> %r", declaration.name, declaration.value, converted)
        declaration.value = converted
        return declaration

    # Older hosts call this hook for declarations
    visit_rule = visit_declaration

    def visit_ruleset(self, ruleset: Ruleset) -> Ruleset:
        for declaration in ruleset.iter_declarations():
            self.visit_declaration(declaration)
        return ruleset

    def run(self, root: Union[Stylesheet, Ruleset, Iterable[Declaration]]):
        """
        Convert every declaration under `root` in document order.

        Returns:
            The same root, converted in place
        """
        if isinstance(root, (Stylesheet, Ruleset)):
            declarations = root.iter_declarations()
        else:
            declarations = root

        count = 0
        for declaration in declarations:
            self.visit_declaration(declaration)
            count += 1
        logger.debug("Visited %d declarations", count)
        return root


def _coerce_options(options: OptionsLike) -> Options:
    if options is None:
        return Options()
    if isinstance(options, Options):
        return options
    return Options().configure(options)


def create(options: OptionsLike = None, **kwargs: Any) -> ResolutionIndependence:
    """Build an engine from defaults overridden by `options` and keyword arguments."""
    return ResolutionIndependence(options, **kwargs)


__all__ = ["ResolutionIndependence", "create"]
