"""Error types raised at rot3_manifold boundaries."""


class Rot3Error(Exception):
    """Base class for rot3_manifold errors."""
    pass


class InvalidArgument(Rot3Error, ValueError):
    """Raised for an out-of-range index or a wrongly shaped input."""
    pass


class DomainError(Rot3Error, ValueError):
    """Raised when a validated constructor receives input outside its domain."""
    pass


class ConfigError(Rot3Error, ValueError):
    """Raised when a configuration mapping or file cannot be interpreted."""
    pass
