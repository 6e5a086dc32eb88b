"""JSON codec built on pydantic's TypeAdapter.

The codec is the only place that knows how a stored document maps onto the
host's settings type. Any type pydantic can validate works: ``BaseModel``
subclasses, dataclasses, ``TypedDict`` or plain ``dict[str, Any]``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import pydantic_core
from pydantic import TypeAdapter, ValidationError

from settingstore.core.constants import DEFAULT_INDENT, EMPTY_DOCUMENT
from settingstore.core.shared.exceptions import DecodeError

T = TypeVar("T")


class JsonCodec(Generic[T]):
    """Decode and encode values of one settings type.

    Decoding always builds a fresh object (never merges into an existing one)
    and ignores object members explicitly set to ``null`` so that the field
    defaults of the target type survive. Encoding omits ``None`` fields.
    """

    def __init__(self, target: type[T] | Any, indent: int = DEFAULT_INDENT) -> None:
        self._adapter: TypeAdapter[T] = TypeAdapter(target)
        self.indent = indent

    def decode(self, text: str) -> T | None:
        """Decode JSON text into the target type.

        Args:
            text: Raw document contents.

        Returns:
            The decoded value, or None when the document is the literal ``null``.

        Raises:
            DecodeError: If the text is not JSON or does not validate.
        """
        try:
            payload = pydantic_core.from_json(text)
        except ValueError as exc:
            msg = f"Malformed JSON: {exc}"
            raise DecodeError(msg) from exc

        if payload is None:
            return None

        try:
            return self._adapter.validate_python(_drop_nulls(payload))
        except ValidationError as exc:
            msg = f"Document does not match the expected type: {exc}"
            raise DecodeError(msg) from exc

    def decode_empty(self) -> T:
        """Decode the canonical empty document ``{}``.

        Raises:
            DecodeError: If the target type has required fields.
        """
        value = self.decode(EMPTY_DOCUMENT)
        if value is None:  # pragma: no cover - "{}" never decodes to null
            msg = "Empty document decoded to null"
            raise DecodeError(msg)
        return value

    def encode(self, value: T) -> str:
        """Serialize a value as indented JSON without ``None`` fields."""
        data = self._adapter.dump_json(value, indent=self.indent or None, exclude_none=True)
        return data.decode("utf-8")


def _drop_nulls(payload: Any) -> Any:
    """Remove object members whose value is null, recursively.

    Nulls inside arrays are kept; only object members are ignored.
    """
    if isinstance(payload, dict):
        return {key: _drop_nulls(value) for key, value in payload.items() if value is not None}
    if isinstance(payload, list):
        return [_drop_nulls(item) for item in payload]
    return payload


__all__ = ["JsonCodec"]
