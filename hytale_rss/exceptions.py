class FetchError(Exception):
    """Raised when the news page cannot be fetched (network, timeout, non-2xx status)."""


class ParseError(Exception):
    """Raised when the fetched page cannot be parsed into a DOM tree."""


class DateParseError(ValueError):
    """Raised when a post date does not match the expected format. Never leaves the normalizer."""
