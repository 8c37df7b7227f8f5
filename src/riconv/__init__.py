"""
Resolution-Independence Converter (riconv)

Rewrites fixed-size lengths (px) in stylesheet value trees into
resolution-independent units (rem), scaled by a configurable base size
and never shrunk below a usable floor.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Stylesheet parsing
    - Selector matching
    - Code generation for a specific preprocessor

It converts value trees only. Parsing and output happen in the host.
"""

from riconv.config import ConfigurationError, Options
from riconv.convert import ValueConversionError, convert_scalar, convert_token
from riconv.engine import ResolutionIndependence, create
from riconv.model import Declaration

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Declaration",
    "Options",
    "ResolutionIndependence",
    "ValueConversionError",
    "convert_scalar",
    "convert_token",
    "create",
]
