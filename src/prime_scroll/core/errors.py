"""Exception types raised by prime_scroll."""


class PrimeScrollError(Exception):
    """Base class for all prime_scroll errors."""


class InvalidInputError(PrimeScrollError, ValueError):
    """A cursor, count or start value was rejected before scanning."""


class ResourceExhaustionError(PrimeScrollError, RuntimeError):
    """A scan ran past a host-imposed bound or the int64 storage range."""


class ScanCancelledError(PrimeScrollError):
    """A scan observed its cancellation flag and stopped early."""
