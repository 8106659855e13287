"""Table-driven field enumerations.

A field enumeration names the numeric attributes of one record type. Each
member is declared as ``NAME = code, token, *aliases`` and that declaration is
the only table: validation, the text/JSON codec and extraction all read it.

The long-form token doubles as the record attribute name and its JSON key,
so extraction is a plain attribute lookup.
"""

import json
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from chartype.errors import InvalidFieldError, MalformedPayloadError

ZERO = Decimal(0)


class FieldEnum(Enum):
    """Base class for closed sets of record fields.

    Members are never constructed at runtime. Raw integer codes coming from
    configuration or storage are checked with ``validate``; anything outside
    the declared codes (conventionally 0) is invalid.
    """

    def __new__(cls, code: int, token: str, *aliases: str):
        member = object.__new__(cls)
        member._value_ = code
        member.token = token
        member.aliases = aliases
        return member

    def __str__(self) -> str:
        return self.token

    @property
    def code(self) -> int:
        """Integer code of the member."""
        return self.value

    @classmethod
    def label(cls) -> str:
        """Short lowercase name of the enumeration, e.g. ``candle``."""
        return cls.__name__.removesuffix("Field").lower()

    @classmethod
    def _lookup(cls, field: Any) -> Optional["FieldEnum"]:
        if isinstance(field, cls):
            return field
        # Members of other enums and bools are ints too, but never valid codes.
        if isinstance(field, (Enum, bool)) or not isinstance(field, int):
            return None
        return cls._value2member_map_.get(field)

    @classmethod
    def validate(cls, field: Any) -> "FieldEnum":
        """Check that a member or raw code belongs to this enumeration.

        Args:
            field: A member or an integer code.

        Returns:
            The matching member.

        Raises:
            InvalidFieldError: If the code is not in the closed set.
        """
        member = cls._lookup(field)
        if member is None:
            raise InvalidFieldError(cls, field)
        return member

    @classmethod
    def encode_text(cls, field: Any) -> str:
        """Return the canonical lowercase long-form token of a field."""
        return cls.validate(field).token

    @classmethod
    def encode_json(cls, field: Any) -> bytes:
        """Return the field as a JSON string scalar, e.g. ``b'"close"'``."""
        return json.dumps(cls.encode_text(field)).encode("utf-8")

    @classmethod
    def decode_text(cls, text: str | bytes) -> "FieldEnum":
        """Match a long-form token or short-form alias, ignoring case.

        Raises:
            InvalidFieldError: If the text matches no member.
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("utf-8")
            except UnicodeDecodeError:
                raise InvalidFieldError(cls, text) from None
        if not isinstance(text, str):
            raise InvalidFieldError(cls, text)

        key = text.lower()
        for member in cls:
            if key == member.token or key in member.aliases:
                return member
        raise InvalidFieldError(cls, text)

    @classmethod
    def decode_json(cls, data: str | bytes) -> "FieldEnum":
        """Decode a JSON string scalar holding a token or alias.

        The payload must be well-formed JSON holding a string before any
        token matching happens.

        Raises:
            MalformedPayloadError: If the payload is not a JSON string.
            InvalidFieldError: If the string matches no member.
        """
        try:
            value = json.loads(data)
        except (ValueError, TypeError) as e:
            raise MalformedPayloadError(data, str(e)) from e
        if not isinstance(value, str):
            raise MalformedPayloadError(data, f"expected a JSON string, got {type(value).__name__}")
        return cls.decode_text(value)

    @classmethod
    def extract(cls, field: Any, record: Any) -> Decimal:
        """Return the record value named by a field.

        Unlike ``validate``, this never fails: an invalid code yields
        ``Decimal(0)``.
        """
        member = cls._lookup(field)
        if member is None:
            return ZERO
        return getattr(record, member.token)
