class GenerationError(Exception):
    """Base class for every failure the aggregator reports."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidWindowLength(GenerationError):
    """Requested charging window is outside the allowed hour range."""


class NoDataFound(GenerationError):
    """Provider returned no samples for the requested period."""


class InsufficientData(GenerationError):
    """Provider returned fewer samples than the window needs."""


class ProviderUnavailable(GenerationError):
    """Transport or HTTP failure talking to the generation provider."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
