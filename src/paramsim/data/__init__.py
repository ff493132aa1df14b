"""Parameter input loading."""

from .loader import ParameterLoader, parse_parameter_spec

__all__ = ["ParameterLoader", "parse_parameter_spec"]
