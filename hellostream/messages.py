"""The HelloRequest and HelloResponse messages and their protobuf wire encoding."""

from __future__ import annotations

from dataclasses import dataclass

_WIRE_VARINT = 0
_WIRE_FIXED64 = 1
_WIRE_LENGTH_DELIMITED = 2
_WIRE_FIXED32 = 5

_MAX_VARINT_BYTES = 10


class MessageDecodeError(ValueError):
    """Raised when bytes cannot be decoded into a message."""


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        low = value & 0x7F
        value >>= 7
        if value:
            out.append(low | 0x80)
        else:
            out.append(low)
            return bytes(out)


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    for shift_index, byte in enumerate(data[pos : pos + _MAX_VARINT_BYTES]):
        result |= (byte & 0x7F) << (7 * shift_index)
        if not byte & 0x80:
            return result, pos + shift_index + 1
    if len(data) - pos >= _MAX_VARINT_BYTES:
        raise MessageDecodeError("varint is too long")
    raise MessageDecodeError("truncated varint")


def _encode_string_field(number: int, value: str) -> bytes:
    if not value:
        return b""
    payload = value.encode("utf-8")
    key = _encode_varint((number << 3) | _WIRE_LENGTH_DELIMITED)
    return key + _encode_varint(len(payload)) + payload


def _decode_string_field(data: bytes, number: int) -> str:
    """Return the last value of string field ``number``, skipping other fields."""
    data = bytes(data)
    value = ""
    pos = 0
    while pos < len(data):
        key, pos = _read_varint(data, pos)
        field, wire_type = key >> 3, key & 0x07
        if field == 0:
            raise MessageDecodeError("field number 0 is invalid")
        if wire_type == _WIRE_VARINT:
            _, pos = _read_varint(data, pos)
        elif wire_type == _WIRE_FIXED64:
            pos += 8
        elif wire_type == _WIRE_FIXED32:
            pos += 4
        elif wire_type == _WIRE_LENGTH_DELIMITED:
            length, pos = _read_varint(data, pos)
            end = pos + length
            if end > len(data):
                raise MessageDecodeError("length-delimited field runs past the end")
            if field == number:
                try:
                    value = data[pos:end].decode("utf-8")
                except UnicodeDecodeError as exc:
                    raise MessageDecodeError("string field is not valid UTF-8") from exc
            pos = end
            continue
        else:
            raise MessageDecodeError(f"unsupported wire type {wire_type}")
        if field == number:
            raise MessageDecodeError(f"field {number} must be a string")
        if pos > len(data):
            raise MessageDecodeError("fixed-width field runs past the end")
    return value


@dataclass(frozen=True)
class HelloRequest:
    """A request carrying one string."""

    some_string: str = ""

    def to_bytes(self) -> bytes:
        return _encode_string_field(1, self.some_string)

    @classmethod
    def from_bytes(cls, data: bytes) -> "HelloRequest":
        return cls(some_string=_decode_string_field(data, 1))


@dataclass(frozen=True)
class HelloResponse:
    """A reply carrying one string."""

    reply: str = ""

    def to_bytes(self) -> bytes:
        return _encode_string_field(1, self.reply)

    @classmethod
    def from_bytes(cls, data: bytes) -> "HelloResponse":
        return cls(reply=_decode_string_field(data, 1))