"""
Conversion Options

Holds the tunable parameters of the resolution-independence conversion:

    - base_size: root font-size all conversions are based upon
    - ri_unit: resolution-independent unit written for scaled values
    - unit: source unit that gets converted
    - absolute_unit: unit that skips scaling and maps 1:1 onto `unit`
    - min_unit_size: smallest magnitude (in `unit`) a measurement may take
      at the lowest supported resolution
    - min_size: root font-size of the lowest supported resolution
    - precision: maximum fractional digits of a scaled value

ARCHITECTURAL RULE:
    Options are immutable. Reconfiguring produces a new object, so an
    engine mid-traversal never observes a partial update.
"""
from __future__ import annotations

import json
import math
import warnings
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml


class ConfigurationError(ValueError):
    """Raised when options cannot produce finite conversions."""
    pass


# Option names as spelled by stylesheet tooling option files
_CAMEL_CASE_KEYS = {
    "baseSize": "base_size",
    "riUnit": "ri_unit",
    "unit": "unit",
    "absoluteUnit": "absolute_unit",
    "minUnitSize": "min_unit_size",
    "minSize": "min_size",
    "precision": "precision",
}


@dataclass(frozen=True)
class Options:
    """
    Immutable conversion parameters.

    `min_scale_factor` is derived (min_size / base_size) and only used to
    decide whether a value would fall below `min_unit_size` once scaled
    down to the smallest supported resolution.

    Example:
        Options(base_size=24, min_size=16).min_scale_factor  # 0.6667
    """

    base_size: float = 24
    ri_unit: str = "rem"
    unit: str = "px"
    absolute_unit: str = "apx"
    min_unit_size: float = 1
    min_size: float = 16
    precision: int = 5
    min_scale_factor: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _validate(self)
        object.__setattr__(self, "min_scale_factor", self.min_size / self.base_size)
        if not math.isfinite(self.min_scale_factor):
            raise ConfigurationError(
                f"min_size / base_size is not finite ({self.min_size} / {self.base_size})"
            )

    def configure(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Options:
        """
        Return a copy with the supplied fields replaced.

        Omitted fields keep their current value. Accepts snake_case or
        camelCase keys in `options`; keyword arguments win over the mapping.

        Raises:
            ConfigurationError: If the merged options are invalid
        """
        changes = normalize_option_keys(options or {})
        changes.update(normalize_option_keys(kwargs))
        if not changes:
            return self
        return replace(self, **changes)


def _validate(opts: Options) -> None:
    for name in ("ri_unit", "unit", "absolute_unit"):
        value = getattr(opts, name)
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"{name} must be a non-empty string, got {value!r}")

    for name in ("base_size", "min_size"):
        value = getattr(opts, name)
        if not _is_number(value) or not math.isfinite(value) or value <= 0:
            raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}")

    if not _is_number(opts.min_unit_size) or not math.isfinite(opts.min_unit_size) or opts.min_unit_size < 0:
        raise ConfigurationError(
            f"min_unit_size must be a non-negative finite number, got {opts.min_unit_size!r}"
        )

    if isinstance(opts.precision, bool) or not isinstance(opts.precision, int) or opts.precision < 0:
        raise ConfigurationError(f"precision must be a non-negative integer, got {opts.precision!r}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_option_keys(options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map option keys onto `Options` field names.

    Unknown keys are dropped with a UserWarning; `None` values count as
    omitted.
    """
    known = {f.name for f in fields(Options) if f.init}
    result: Dict[str, Any] = {}
    for key, value in options.items():
        name = _CAMEL_CASE_KEYS.get(key, key)
        if name not in known:
            warnings.warn(f"Ignoring unknown option: {key}", UserWarning)
            continue
        if value is None:
            continue
        result[name] = value
    return result


def options_from_dict(d: Mapping[str, Any], base: Optional[Options] = None) -> Options:
    return (base or Options()).configure(d)


def options_to_dict(opts: Options) -> Dict[str, Any]:
    return {f.name: getattr(opts, f.name) for f in fields(Options) if f.init}


def load_options(path: str | Path, base: Optional[Options] = None) -> Options:
    """
    Read options from a YAML or JSON file.

    Args:
        path: Option file; `.json` files are read as JSON, anything else
            as YAML
        base: Options the file values are merged onto (defaults otherwise)

    Returns:
        Validated Options

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the file is not a mapping or values are invalid
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Option file must contain a mapping: {path}")
    return options_from_dict(data, base=base)


__all__ = [
    "Options",
    "ConfigurationError",
    "normalize_option_keys",
    "options_from_dict",
    "options_to_dict",
    "load_options",
]
