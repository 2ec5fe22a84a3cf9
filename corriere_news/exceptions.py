class CorriereNewsError(Exception):
    """Base class for errors raised by corriere_news."""


class UpstreamFetchError(CorriereNewsError):
    """Raised when the source page cannot be fetched or its body cannot be read."""


class ConfigurationError(CorriereNewsError):
    """Raised when one of the fixed structural queries fails to compile."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Failed to parse {query} selector: {reason}")
