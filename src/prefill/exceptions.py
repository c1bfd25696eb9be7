"""Exceptions raised while building a prefilled form URL.

Hierarchy:
- PrefillError: Base exception for everything in this package
- ConfigurationError: Config file missing, unreadable or malformed
- UrlParseError: Base URL is not a usable URL
- ValidationError: An entry has an empty question id
- DecodeError: The assembled query string could not be unescaped
"""


class PrefillError(Exception):
    """Base exception for prefill errors."""


class ConfigurationError(PrefillError):
    """Config source missing, unparseable, or missing required fields.

    Attributes:
        source: Path (or "<string>") of the config that failed.
    """

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Invalid configuration {source}: {message}")


class UrlParseError(PrefillError):
    """Base URL could not be parsed.

    Attributes:
        url: The offending URL string.
    """

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Failed to parse URL {url!r}: {message}")


class ValidationError(PrefillError):
    """An entry failed validation.

    Attributes:
        index: 0-based position of the entry in the input list.
    """

    def __init__(self, index: int, message: str) -> None:
        self.index = index
        super().__init__(f"Entry {index}: {message}")


class DecodeError(PrefillError):
    """Query string could not be unescaped for display.

    Attributes:
        query: The encoded query string.
    """

    def __init__(self, query: str, message: str) -> None:
        self.query = query
        super().__init__(f"Failed to decode query {query!r}: {message}")
