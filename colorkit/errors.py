"""Color parsing and sampling errors."""


class ColorKitError(Exception):
    """Base class for colorkit errors."""
    pass


class ColorParseError(ColorKitError, ValueError):
    """Text does not match any recognized color syntax."""

    def __init__(self, text: str, reason: str | None = None):
        self.text = text
        self.reason = reason
        message = f'Unable to parse color: "{text}"'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SamplingError(ColorKitError, ValueError):
    """Invalid sampling configuration (step counts, thresholds, options)."""
    pass
