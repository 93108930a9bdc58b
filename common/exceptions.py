class ElementNotEnabledError(RuntimeError):
    """Raised when an element stays disabled after the enablement poll is exhausted."""


class FixtureDataError(LookupError):
    """
    Raised for a broken test setup: fixture index out of bounds,
    required fixture entry missing or malformed fixture file.
    Never routed through soft assertions.
    """
