"""Pydantic value types for varuint integers.

``Varuint`` and ``Varint`` wrap a single validated integer and know how to
measure, serialize and deserialize themselves. The annotated aliases
(``UInt8`` .. ``Int64``) constrain plain ``int`` fields of other models to the
matching width.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .codec import decode, decode_signed, encode, encode_signed, encoded_length, encoded_length_signed
from .config import I8, I16, I32, I64, U8, U16, U32, U64, IntWidth
from .streams import Sink, Source

UInt8 = Annotated[int, Field(ge=U8.min_value, le=U8.max_value)]
UInt16 = Annotated[int, Field(ge=U16.min_value, le=U16.max_value)]
UInt32 = Annotated[int, Field(ge=U32.min_value, le=U32.max_value)]
UInt64 = Annotated[int, Field(ge=U64.min_value, le=U64.max_value)]
Int8 = Annotated[int, Field(ge=I8.min_value, le=I8.max_value)]
Int16 = Annotated[int, Field(ge=I16.min_value, le=I16.max_value)]
Int32 = Annotated[int, Field(ge=I32.min_value, le=I32.max_value)]
Int64 = Annotated[int, Field(ge=I64.min_value, le=I64.max_value)]


class _Integer(BaseModel):
    """Common behaviour of the integer value types."""

    model_config = ConfigDict(
        # Reject bool and numeric strings
        strict=True,
        frozen=True,
        extra="forbid",
    )

    value: int = 0

    width: ClassVar[IntWidth] = U64

    def __init__(self, value: int = 0, /, **data: Any) -> None:
        data.setdefault("value", value)
        super().__init__(**data)

    @field_validator("value")
    @classmethod
    def check_width(cls, value: int) -> int:
        if not cls.width.contains(value):
            raise ValueError(
                f"{value} is outside the {cls.width} range "
                f"({cls.width.min_value} to {cls.width.max_value})"
            )
        return value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value


class Varuint(_Integer):
    """Variable-length unsigned integer.

    Example:
        >>> import io
        >>> v = Varuint(2031)
        >>> v.size_hint()
        2
        >>> buf = io.BytesIO()
        >>> v.serialize(buf)
        2
        >>> _ = buf.seek(0)
        >>> Varuint.deserialize(buf)
        Varuint(value=2031)
    """

    width: ClassVar[IntWidth] = U64

    def size_hint(self) -> int:
        """Return the encoded size in bytes."""
        return encoded_length(self.value, bits=self.width.bits)

    def serialize(self, sink: Sink) -> int:
        """Write the value to ``sink``; returns bytes written."""
        return encode(self.value, sink, bits=self.width.bits)

    @classmethod
    def deserialize(cls, source: Source) -> Varuint:
        """Read one value from ``source``."""
        return cls(decode(source, bits=cls.width.bits))


class Varint(_Integer):
    """Variable-length signed integer, zigzag-mapped onto the Varuint format.

    Example:
        >>> Varint(-1).size_hint()
        1
    """

    width: ClassVar[IntWidth] = I64

    def size_hint(self) -> int:
        """Return the encoded size in bytes."""
        return encoded_length_signed(self.value, bits=self.width.bits)

    def serialize(self, sink: Sink) -> int:
        """Write the value to ``sink``; returns bytes written."""
        return encode_signed(self.value, sink, bits=self.width.bits)

    @classmethod
    def deserialize(cls, source: Source) -> Varint:
        """Read one value from ``source``."""
        return cls(decode_signed(source, bits=cls.width.bits))


class Varuint8(Varuint):
    width: ClassVar[IntWidth] = U8


class Varuint16(Varuint):
    width: ClassVar[IntWidth] = U16


class Varuint32(Varuint):
    width: ClassVar[IntWidth] = U32


class Varint8(Varint):
    width: ClassVar[IntWidth] = I8


class Varint16(Varint):
    width: ClassVar[IntWidth] = I16


class Varint32(Varint):
    width: ClassVar[IntWidth] = I32
