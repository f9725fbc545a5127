"""Polymorphic value codec for Bot API objects.

Bot API objects are plain Pydantic models (see :mod:`tgbotapi.models`).  The
only thing Pydantic does not give us for free is the Bot API's notion of a
union: a value that is exactly one of several shapes, decoded first-match-wins.
:func:`one_of` builds such a union type; :func:`decode`, :func:`decode_json`
and :func:`encode` are the public entry points used by callers that receive
raw ``result`` payloads or need wire-ready parameter values.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Dict, List, Optional, Tuple, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError, WrapValidator
from pydantic_core import PydanticCustomError

from tgbotapi.exceptions import DecodingError, NoVariantMatched

_codec_logger = logging.getLogger("tgbotapi.codec")

UNION_NO_MATCH = "union_no_match"


class _UnionDecoder:
    """Decode a raw value into the first matching variant of a union.

    With ``tag=None`` every variant is tried in declared order.  With a tag
    (``"type"``, ``"status"``, ``"source"``) the tag's literal value selects
    the group of variants declaring that value, and only that group is tried,
    still in declared order.
    """

    def __init__(self, name: str, variants: Tuple[Any, ...], tag: Optional[str] = None) -> None:
        self.name = name
        self.variants = variants
        self.tag = tag
        self._model_types = tuple(
            v for v in variants if isinstance(v, type) and issubclass(v, BaseModel)
        )
        self._adapters: Dict[int, TypeAdapter] = {}
        self._groups: Optional[Dict[Any, List[Any]]] = None

    # ------------------------------------------------------------------
    #  Candidate selection
    # ------------------------------------------------------------------

    def _tag_table(self) -> Dict[Any, List[Any]]:
        """Map each tag value to the variants declaring it, in declared order."""
        if self._groups is None:
            groups: Dict[Any, List[Any]] = {}
            for variant in self._model_types:
                field = variant.model_fields.get(self.tag)
                if field is None:
                    raise TypeError(f"{variant.__name__} has no {self.tag!r} field to dispatch {self.name} on")
                groups.setdefault(field.default, []).append(variant)
            self._groups = groups
        return self._groups

    def _candidates(self, value: Any) -> List[Any]:
        if self.tag is None:
            return list(self.variants)
        if not isinstance(value, dict):
            return []
        tag_value = value.get(self.tag)
        # Tags are JSON strings; anything else (including unhashable lists
        # and objects) selects no group.
        if not isinstance(tag_value, str):
            return []
        return self._tag_table().get(tag_value, [])

    def _validate(self, candidate: Any, value: Any) -> Any:
        if isinstance(candidate, type) and issubclass(candidate, BaseModel):
            return candidate.model_validate(value)
        adapter = self._adapters.get(id(candidate))
        if adapter is None:
            adapter = self._adapters[id(candidate)] = TypeAdapter(candidate)
        return adapter.validate_python(value)

    # ------------------------------------------------------------------
    #  Validator entry point
    # ------------------------------------------------------------------

    def validate(self, value: Any, handler: Any) -> Any:
        """Wrap-validator hook; *handler* is deliberately never invoked."""
        if self._model_types and isinstance(value, self._model_types):
            return value
        for candidate in self._candidates(value):
            try:
                return self._validate(candidate, value)
            except ValidationError as exc:
                _codec_logger.debug(
                    "Union candidate rejected",
                    extra={
                        "union": self.name,
                        "candidate": getattr(candidate, "__name__", repr(candidate)),
                        "error_count": exc.error_count(),
                    },
                )
        raise PydanticCustomError(UNION_NO_MATCH, "no variant of {union} matched", {"union": self.name})


def one_of(name: str, *variants: Any, tag: Optional[str] = None) -> Any:
    """Return an annotated union type decoded first-match-wins.

    Args:
        name: Union name used in error messages, e.g. ``"ReplyMarkup"``.
        *variants: Candidate types in priority order.
        tag: Optional discriminant field shared by every variant.

    The decoded value is always the variant instance itself, so encoding it is
    identical to encoding the variant directly.
    """
    decoder = _UnionDecoder(name, variants, tag)
    return Annotated[Union[variants], WrapValidator(decoder.validate)]


def union_name(tp: Any) -> Optional[str]:
    """Return the name a :func:`one_of` union was declared with, else ``None``."""
    if get_origin(tp) is not Annotated:
        return None
    for meta in get_args(tp)[1:]:
        decoder = getattr(getattr(meta, "func", None), "__self__", None)
        if isinstance(decoder, _UnionDecoder):
            return decoder.name
    return None


def _type_name(tp: Any) -> str:
    name = union_name(tp)
    if name is not None:
        return name
    if isinstance(tp, type):
        return tp.__name__
    return repr(tp)


# ── Public API ───────────────────────────────────────────────────────────────


def decode(tp: Any, data: Any) -> Any:
    """Validate already-parsed JSON *data* against *tp*.

    *tp* may be a model class, a :func:`one_of` union or any type expression
    such as ``List[Update]``.

    Raises:
        NoVariantMatched: *tp* is a union and no variant matched *data*.
        DecodingError: For every other validation failure.
    """
    type_name = _type_name(tp)
    try:
        if isinstance(tp, type) and issubclass(tp, BaseModel):
            return tp.model_validate(data)
        return TypeAdapter(tp).validate_python(data)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        _codec_logger.info("Decode failed", extra={"type_name": type_name, "error_count": len(errors)})
        top = errors[0] if len(errors) == 1 else None
        if top is not None and top["type"] == UNION_NO_MATCH and not top["loc"]:
            raise NoVariantMatched(top["ctx"]["union"], errors) from exc
        raise DecodingError(type_name, errors) from exc


def decode_json(tp: Any, raw: Union[str, bytes, bytearray]) -> Any:
    """Parse *raw* JSON text and :func:`decode` it against *tp*."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        _codec_logger.info("Decode failed", extra={"type_name": _type_name(tp), "error_count": 0})
        raise DecodingError(_type_name(tp), detail=f"malformed JSON ({exc})") from exc
    return decode(tp, data)


def encode(value: Any) -> Any:
    """Turn *value* into plain JSON-ready data using Bot API wire names.

    Models drop every unset (``None``) field; containers are encoded
    element-wise and ``None`` dict values are dropped.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    if isinstance(value, dict):
        return {key: encode(item) for key, item in value.items() if item is not None}
    return value
