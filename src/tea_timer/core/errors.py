class TeaTimerError(Exception):
    """Base class for every error the timer reports to the user."""


class NotFoundError(TeaTimerError):
    def __init__(self, selector):
        self.selector = selector
        super().__init__(f"Tea '{selector}' not found!")


class DurationParseError(TeaTimerError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid duration '{text}'. Use e.g. 90s, 2m, 1m30s or 1h")


class NegativeDurationError(TeaTimerError):
    def __init__(self, message="Total duration must be positive!"):
        super().__init__(message)


class CatalogParseError(TeaTimerError):
    """Malformed external catalog. Recoverable: the built-in teas are used instead."""


class CatalogFileError(TeaTimerError):
    pass


class MissingArgumentsError(TeaTimerError):
    def __init__(self):
        super().__init__("Either --tea or --duration is required")


class ConfigError(TeaTimerError):
    """Raised when the timer configuration is invalid."""
