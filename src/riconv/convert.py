"""
Length Conversion

Pure functions turning source-unit lengths into resolution-independent
ones. Two entry points share the same numeric policy:

    - convert_scalar: number + unit symbol -> Measurement
    - convert_token: "10px" -> "0.41667rem"

Scale-or-clamp rule:
    A source-unit value is divided by `base_size` and rounded to
    `precision` digits, unless it would shrink to `min_unit_size` or
    below at the smallest supported resolution. Such values are clamped
    to the floor (sign kept), or left alone when already below it.
    Zero always scales.

Absolute-unit values map 1:1 onto the source unit. Every other unit
passes through untouched, so converting twice is harmless.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional

from riconv.config import Options


class ValueConversionError(ValueError):
    """Raised when a length cannot be converted to a finite number."""
    pass


_NUMBER_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Measurement:
    """A converted magnitude and the unit symbol it is expressed in."""

    value: float
    unit: Optional[str]


def convert_scalar(value: float, unit: Optional[str], options: Options) -> Measurement:
    """
    Convert a number with a separate unit symbol.

    Args:
        value: Magnitude
        unit: Unit symbol (None for unitless numbers)
        options: Conversion options

    Returns:
        Measurement in the absolute->source, scaled, clamped or original unit

    Raises:
        ValueConversionError: If a source-unit magnitude is not finite, or
            overflows once divided by base_size
    """
    if unit == options.absolute_unit:
        return Measurement(value, options.unit)
    if unit == options.unit:
        return _scale_or_clamp(value, options)
    return Measurement(value, unit)


def convert_token(token: str, options: Options) -> str:
    """
    Convert a single text token such as `10px`, `4apx` or `solid`.

    The absolute suffix is tested before the source suffix since the
    default absolute unit (`apx`) itself ends with the source unit (`px`).

    Raises:
        ValueConversionError: If a token ending in a convertible unit has
            no numeric prefix or does not fit a finite number
    """
    if token.endswith(options.absolute_unit):
        value = _require_finite(parse_number_prefix(token))
        return format_number(value) + options.unit

    if token.endswith(options.unit):
        result = _scale_or_clamp(parse_number_prefix(token), options)
        return format_number(result.value) + result.unit

    return token


def _scale_or_clamp(value: float, options: Options) -> Measurement:
    _require_finite(value)

    scaled = abs(value * options.min_scale_factor)
    if scaled and scaled <= options.min_unit_size:
        if abs(value) < options.min_unit_size:
            return Measurement(value, options.unit)
        return Measurement(options.min_unit_size * (-1 if value < 0 else 1), options.unit)

    quotient = _require_finite(value / options.base_size)
    return Measurement(round_half_away(quotient, options.precision), options.ri_unit)


def _require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueConversionError(f"Cannot convert non-finite length: {value!r}")
    return value


def round_half_away(value: float, precision: int) -> float:
    """
    Round to `precision` fractional digits, ties away from zero.

    Works on the exact binary value of `value`, the same way fixed-decimal
    formatting does, so 1.005 rounds to 1.0 at two digits.
    """
    exact = Decimal(value)
    context = Context(prec=max(28, exact.adjusted() + precision + 2))
    return float(exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP, context=context))


def parse_number_prefix(text: str) -> float:
    """
    Parse the leading number of a token (`-1.5e2px` -> -150.0).

    Raises:
        ValueConversionError: If the token does not start with a number
    """
    match = _NUMBER_PREFIX_RE.match(text)
    if not match:
        raise ValueConversionError(f"No numeric value in length token: {text!r}")
    return float(match.group(1))


def format_number(value: float) -> str:
    """
    Render a magnitude for stylesheet output.

    Integral values drop the fraction (`1`, not `1.0`), exponent notation
    is expanded (`0.00001`, not `1e-05`) and negative zero prints as `0`.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


__all__ = [
    "Measurement",
    "ValueConversionError",
    "convert_scalar",
    "convert_token",
    "round_half_away",
    "parse_number_prefix",
    "format_number",
]
