"""Typed exceptions for value generation and parameter resolution."""


class GenerationError(ValueError):
    """Base class for failures of a single generation call."""


class UnsupportedTypeError(GenerationError):
    """Raised when no generation strategy is registered for a requested kind."""


class UnsupportedRangeError(GenerationError):
    """Raised when numeric bounds describe an empty or unusable range."""


class UnresolvableBlockFilterError(GenerationError):
    """Raised when a Unicode block filter cannot yield the requested string."""


class ParameterResolutionError(RuntimeError):
    """Raised by the host boundary when a parameter cannot be resolved."""
