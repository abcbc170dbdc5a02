"""JSON and compact binary serialization of plain values and dataclasses."""

import dataclasses
import json
import struct
import types
import typing
from abc import ABC, abstractmethod
from typing import Any, Union

from corekernel.errors import FormatError, JsonError

_NONE = type(None)
_I64 = struct.Struct("<q")
_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")

_NAMED_TYPES = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "bytes": bytes,
    "bytearray": bytearray,
}


def _field_hint(item: dataclasses.Field) -> Any:
    """Return a field's declared type; textual annotations map to builtins only."""
    hint = item.type
    if isinstance(hint, str):
        return _NAMED_TYPES.get(hint.strip())
    return hint


def _unwrap_optional(hint: Any) -> "tuple[bool, Any]":
    origin = typing.get_origin(hint)
    if origin is Union or origin is types.UnionType:
        args = typing.get_args(hint)
        rest = [arg for arg in args if arg is not _NONE]
        if len(args) == 2 and len(rest) == 1:
            return True, rest[0]
    return False, hint


def _is_dataclass_type(hint: Any) -> bool:
    return isinstance(hint, type) and dataclasses.is_dataclass(hint)


def _init_fields(kind: type) -> "list[dataclasses.Field]":
    return [item for item in dataclasses.fields(kind) if item.init]


# ---- JSON -----------------------------------------------------------------


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {item.name: _to_plain(getattr(value, item.name)) for item in dataclasses.fields(value)}
    if isinstance(value, (bytes, bytearray, memoryview)):
        return list(bytes(value))
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


def _from_plain(value: Any, hint: Any) -> Any:
    if hint is None or hint is Any:
        return value
    optional, inner = _unwrap_optional(hint)
    if optional:
        return None if value is None else _from_plain(value, inner)
    if _is_dataclass_type(hint):
        if not isinstance(value, dict):
            raise JsonError(f"expected an object for {hint.__name__}")
        kwargs = {}
        for item in _init_fields(hint):
            field_hint = _field_hint(item)
            if item.name in value:
                kwargs[item.name] = _from_plain(value[item.name], field_hint)
            elif item.default is dataclasses.MISSING and item.default_factory is dataclasses.MISSING:
                if _unwrap_optional(field_hint)[0]:
                    kwargs[item.name] = None
                else:
                    raise JsonError(f"missing field `{item.name}`")
        return hint(**kwargs)
    origin = typing.get_origin(hint) or hint
    args = typing.get_args(hint)
    if origin is bool:
        if isinstance(value, bool):
            return value
    elif origin is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif origin is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif origin is str:
        if isinstance(value, str):
            return value
    elif origin in (bytes, bytearray):
        if isinstance(value, list):
            try:
                return origin(value)
            except (TypeError, ValueError) as exc:
                raise JsonError(exc) from exc
    elif origin is list:
        if isinstance(value, list):
            element = args[0] if args else None
            return [_from_plain(item, element) for item in value]
    elif origin is tuple:
        if isinstance(value, list):
            if not args or (len(args) == 2 and args[1] is Ellipsis):
                element = args[0] if args else None
                return tuple(_from_plain(item, element) for item in value)
            if len(args) == len(value):
                return tuple(_from_plain(item, arg) for item, arg in zip(value, args))
    elif origin is dict:
        if isinstance(value, dict):
            element = args[1] if len(args) == 2 else None
            return {key: _from_plain(item, element) for key, item in value.items()}
    else:
        raise JsonError(f"unsupported target type {hint!r}")
    raise JsonError(f"invalid value {value!r} for {hint!r}")


# ---- binary ---------------------------------------------------------------


def _infer(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return type(value)
    if isinstance(value, (bytearray, memoryview)):
        return bytes
    for kind in (bool, int, float, str, bytes, list, tuple, dict):
        if isinstance(value, kind):
            return kind
    raise FormatError(f"cannot encode a value of type {type(value).__name__}")


def _pack_length(out: bytearray, size: int) -> None:
    out += _U64.pack(size)


def _pack(out: bytearray, value: Any, hint: Any) -> None:
    if hint is None or hint is Any:
        hint = _infer(value)
    optional, inner = _unwrap_optional(hint)
    if optional:
        if value is None:
            out.append(0)
        else:
            out.append(1)
            _pack(out, value, inner)
        return
    if _is_dataclass_type(hint):
        if not isinstance(value, hint):
            raise FormatError(f"expected {hint.__name__}, got {type(value).__name__}")
        for item in _init_fields(hint):
            _pack(out, getattr(value, item.name), _field_hint(item))
        return
    origin = typing.get_origin(hint) or hint
    args = typing.get_args(hint)
    if origin is bool and isinstance(value, bool):
        out.append(1 if value else 0)
    elif origin is int and isinstance(value, int) and not isinstance(value, bool):
        try:
            out += _I64.pack(value)
        except struct.error as exc:
            raise FormatError(exc) from exc
    elif origin is float and isinstance(value, (int, float)) and not isinstance(value, bool):
        out += _F64.pack(float(value))
    elif origin is str and isinstance(value, str):
        encoded = value.encode("utf-8")
        _pack_length(out, len(encoded))
        out += encoded
    elif origin in (bytes, bytearray) and isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        _pack_length(out, len(raw))
        out += raw
    elif origin is list and isinstance(value, (list, tuple)):
        element = args[0] if args else None
        _pack_length(out, len(value))
        for item in value:
            _pack(out, item, element)
    elif origin is tuple and isinstance(value, (list, tuple)):
        if len(args) == 2 and args[1] is Ellipsis:
            _pack_length(out, len(value))
            for item in value:
                _pack(out, item, args[0])
        elif not args:
            for item in value:
                _pack(out, item, None)
        elif len(args) == len(value):
            for item, arg in zip(value, args):
                _pack(out, item, arg)
        else:
            raise FormatError(f"expected {len(args)} tuple items, got {len(value)}")
    elif origin is dict and isinstance(value, dict):
        key_hint, value_hint = args if len(args) == 2 else (None, None)
        _pack_length(out, len(value))
        for key, item in value.items():
            _pack(out, key, key_hint)
            _pack(out, item, value_hint)
    else:
        raise FormatError(f"cannot encode {value!r} as {hint!r}")


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise FormatError("unexpected end of input")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, layout: struct.Struct) -> Any:
        return layout.unpack(self.take(layout.size))[0]


def _unpack(reader: _Reader, hint: Any) -> Any:
    if hint is None or hint is Any:
        raise FormatError("a target type is required to decode")
    optional, inner = _unwrap_optional(hint)
    if optional:
        tag = reader.take(1)[0]
        if tag == 0:
            return None
        if tag == 1:
            return _unpack(reader, inner)
        raise FormatError(f"invalid option tag {tag}")
    if _is_dataclass_type(hint):
        kwargs = {item.name: _unpack(reader, _field_hint(item)) for item in _init_fields(hint)}
        return hint(**kwargs)
    origin = typing.get_origin(hint) or hint
    args = typing.get_args(hint)
    if origin is bool:
        flag = reader.take(1)[0]
        if flag > 1:
            raise FormatError(f"invalid bool byte {flag}")
        return flag == 1
    if origin is int:
        return reader.unpack(_I64)
    if origin is float:
        return reader.unpack(_F64)
    if origin is str:
        raw = reader.take(reader.unpack(_U64))
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(exc) from exc
    if origin in (bytes, bytearray):
        return origin(reader.take(reader.unpack(_U64)))
    if origin is list and args:
        return [_unpack(reader, args[0]) for _ in range(reader.unpack(_U64))]
    if origin is tuple and args:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_unpack(reader, args[0]) for _ in range(reader.unpack(_U64)))
        return tuple(_unpack(reader, arg) for arg in args)
    if origin is dict and len(args) == 2:
        result = {}
        for _ in range(reader.unpack(_U64)):
            key = _unpack(reader, args[0])
            result[key] = _unpack(reader, args[1])
        return result
    raise FormatError(f"cannot decode into {hint!r}")


# ---- public API -----------------------------------------------------------


class Serializer(ABC):
    """Turns values into bytes and back."""

    @abstractmethod
    def serialize(self, data: Any) -> bytes:
        """Encode ``data`` to bytes."""

    @abstractmethod
    def deserialize(self, data: bytes, kind: Any = None) -> Any:
        """Decode bytes into a value of type ``kind``."""


class Json(Serializer):
    """Compact UTF-8 JSON."""

    def serialize(self, data: Any) -> bytes:
        try:
            text = json.dumps(
                _to_plain(data), ensure_ascii=False, separators=(",", ":"), allow_nan=False
            )
        except (TypeError, ValueError) as exc:
            raise JsonError(exc) from exc
        return text.encode("utf-8")

    def deserialize(self, data: bytes, kind: Any = None) -> Any:
        """Decode JSON; without ``kind`` the plain decoded value is returned."""
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise JsonError(exc) from exc
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise JsonError(exc) from exc
        return _from_plain(value, kind)


class Bincode(Serializer):
    """Fixed-width little-endian binary encoding.

    Integers are signed 64-bit, floats 64-bit, strings, bytes and sequences
    carry an unsigned 64-bit length, optional values a one-byte tag, and
    dataclass fields follow in declaration order.
    """

    def serialize(self, data: Any) -> bytes:
        out = bytearray()
        _pack(out, data, None)
        return bytes(out)

    def deserialize(self, data: bytes, kind: Any = None) -> Any:
        """Decode bytes into ``kind``, which is required."""
        return _unpack(_Reader(bytes(data)), kind)


class System:
    """Front end offering both JSON and binary encodings."""

    def __init__(self) -> None:
        self._json = Json()
        self._binary = Bincode()

    def json(self, data: Any) -> bytes:
        """Encode as JSON."""
        return self._json.serialize(data)

    def parse(self, data: bytes, kind: Any = None) -> Any:
        """Decode JSON."""
        return self._json.deserialize(data, kind)

    def encode(self, data: Any) -> bytes:
        """Encode in the binary format."""
        return self._binary.serialize(data)

    def decode(self, data: bytes, kind: Any = None) -> Any:
        """Decode the binary format."""
        return self._binary.deserialize(data, kind)