"""Exception hierarchy for the tgbotapi binding."""

from typing import Any, Dict, List, Optional, Sequence


class BotApiError(Exception):
    """Base exception for every error raised by this library."""


class DecodingError(BotApiError):
    """Raised when wire data cannot be decoded into the requested type.

    Attributes:
        type_name: Name of the type decoding was attempted against.
        errors: Pydantic error dicts, empty when the input was not valid JSON.
    """

    def __init__(
        self,
        type_name: str,
        errors: Optional[Sequence[Dict[str, Any]]] = None,
        detail: Optional[str] = None,
    ) -> None:
        """Initialise with the target type name and the collected errors."""
        self.type_name = type_name
        self.errors: List[Dict[str, Any]] = list(errors or [])
        if detail is None:
            detail = self.errors[0].get("msg", "invalid value") if self.errors else "invalid value"
        super().__init__(f"failed to decode {type_name}: {detail}")


class NoVariantMatched(DecodingError):
    """A union value matched none of its candidate shapes.

    Attributes:
        union: Name of the union, e.g. ``"MaybeInaccessibleMessage"``.
    """

    def __init__(self, union: str, errors: Optional[Sequence[Dict[str, Any]]] = None) -> None:
        """Initialise with the union name."""
        self.union = union
        super().__init__(union, errors, detail=f"no variant of {union} matched")
        self.args = (f"no variant of {union} matched",)


class RequestConstructionError(BotApiError):
    """Raised when a request's target URL cannot be assembled.

    Attributes:
        method: Bot API method name the URL was built for.
        reason: Short human-readable reason (never includes the token).
    """

    def __init__(self, method: str, reason: str) -> None:
        """Initialise with the method name and the rejection reason."""
        self.method = method
        self.reason = reason
        super().__init__(f"cannot build URL for {method!r}: {reason}")
