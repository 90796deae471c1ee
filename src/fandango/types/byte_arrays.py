"""
Fixed-length byte array types.

`BaseBytes` is an immutable `bytes` subclass whose length is fixed by the
concrete type's `LENGTH`. Values are built from raw bytes only.

Text goes through `from_hex`, and `str()` is its inverse. Subclasses whose
text form differs from plain hex (hashes shown byte-reversed) override both
together, so JSON round trips keep the same byte order.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


class BaseBytes(bytes):
    """
    Base class for fixed-length byte values.

    Subclasses set:
      - `LENGTH`: exact number of bytes an instance holds.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: bytes | bytearray | memoryview = b"") -> Self:
        """
        Create and validate a new instance.

        Raises:
            TypeError: If `value` is not bytes-like. Hex text must go through
                `from_hex`, which fixes the byte order.
            ValueError: If the length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"{cls.__name__} takes bytes, not {type(value).__name__}")

        data = bytes(value)
        if len(data) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(data)}")
        return super().__new__(cls, data)

    @classmethod
    def zero(cls) -> Self:
        """Create an instance of all zero bytes."""
        return cls(bytes(cls.LENGTH))

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """Parse plain hex, with or without a `0x` prefix."""
        return cls(bytes.fromhex(text.removeprefix("0x")))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Validate model fields of this type.

        Python input must be an instance or raw bytes of the right length.
        JSON input is the text form, parsed with `from_hex`. Serialization to
        JSON emits `str()`.
        """
        python_schema = core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.chain_schema(
                    [
                        core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
                        core_schema.no_info_plain_validator_function(cls),
                    ]
                ),
            ]
        )
        json_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.from_hex),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=json_schema,
            python_schema=python_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes."""

    LENGTH = 32


ZERO_HASH: Bytes32 = Bytes32.zero()
"""The zero hash, 32 zero bytes."""
