"""Exceptions raised while talking to LeetCode and parsing its responses."""


class LeetCodeError(Exception):
    """Base exception for the LeetCode integration."""

    pass


class ParsingError(LeetCodeError, ValueError):
    """Response payload did not have the expected shape."""

    def __init__(self, message: str, path: str = "$"):
        super().__init__(message)
        self.path = path


class MissingFieldError(ParsingError):
    """A required JSON key was absent."""

    def __init__(self, path: str):
        super().__init__(f"Missing field: {path}", path)


class TypeMismatchError(ParsingError):
    """A JSON value existed but had the wrong type."""

    def __init__(self, path: str, expected: str, actual: object):
        super().__init__(
            f"Type mismatch at {path}: expected {expected}, got {_json_type(actual)}",
            path,
        )
        self.expected = expected


class SecondaryDecodeError(ParsingError):
    """A string field holding JSON could not be decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid JSON string at {path}: {reason}", path)


class InvalidPayloadError(ParsingError):
    """Response body was not JSON at all."""

    pass


class TransportError(LeetCodeError):
    """Network, timeout or HTTP status failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SerializationError(LeetCodeError):
    """Outbound request body could not be encoded."""

    pass


class FetchError(LeetCodeError):
    """Endpoint call failed at fetch or parse stage."""

    def __init__(self, endpoint: str, cause: Exception):
        super().__init__(f"could not fetch/parse {endpoint}: {cause}")
        self.endpoint = endpoint


def _json_type(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
