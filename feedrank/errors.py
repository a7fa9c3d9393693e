"""Exception types raised across the engine/store boundary."""


class FeedrankError(Exception):
    """Base class for engine errors."""


class StoreError(FeedrankError):
    """A store operation failed (backend unavailable, timeout, rejected write).

    Stores raise this instead of returning an error value; the engine catches it
    and degrades to empty data on read paths.
    """
