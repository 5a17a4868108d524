"""Integer width configuration.

The wire format is the same for every width; the width only bounds which
values may be encoded and which decoded values are accepted.
"""

from __future__ import annotations

from dataclasses import dataclass

SUPPORTED_BITS = (8, 16, 32, 64)


@dataclass(frozen=True)
class IntWidth:
    """Bit width and signedness of the integers handled by a codec call.

    Attributes:
        bits: Width in bits (8, 16, 32 or 64, default 64).
        signed: True for two's complement values carried through zigzag,
            False for plain unsigned values (default False).

    Examples:
        ```python
        from varuint.config import IntWidth

        width = IntWidth(bits=16)
        width.max_value  # 65535

        IntWidth(bits=32, signed=True).min_value  # -2147483648
        ```
    """

    bits: int = 64
    signed: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.bits not in SUPPORTED_BITS:
            raise ValueError(f"bits must be one of {SUPPORTED_BITS}, got {self.bits}")

    @property
    def min_value(self) -> int:
        """Smallest value accepted for this width."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest value accepted for this width."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def storage_max(self) -> int:
        """Largest unsigned value on the wire for this width."""
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    @classmethod
    def of(cls, bits: int = 64, signed: bool = False) -> IntWidth:
        """Return the shared instance for ``bits``/``signed``."""
        try:
            return _WIDTHS[(bits, signed)]
        except KeyError:
            # Let __post_init__ produce the error message
            return cls(bits=bits, signed=signed)

    def __str__(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"


U8 = IntWidth(8)
U16 = IntWidth(16)
U32 = IntWidth(32)
U64 = IntWidth(64)
I8 = IntWidth(8, signed=True)
I16 = IntWidth(16, signed=True)
I32 = IntWidth(32, signed=True)
I64 = IntWidth(64, signed=True)

_WIDTHS: dict[tuple[int, bool], IntWidth] = {
    (width.bits, width.signed): width for width in (U8, U16, U32, U64, I8, I16, I32, I64)
}
