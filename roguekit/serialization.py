"""XML component helpers and binary (optionally gzip-compressed) encoding."""

from __future__ import annotations

import gzip
import os
import struct
import typing
from typing import IO, Any, Callable

from roguekit.colors import Color
from roguekit.vchar import VChar
from roguekit.xml import XmlNode

_SIZE = struct.Struct("<Q")
_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<d")
_BOOL = struct.Struct("<?")


def to_string(value: Any) -> str:
    """Render a value the way a text stream would: booleans as 1/0."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _color_to_xml(node: XmlNode, name: str, color: Color) -> None:
    child = node.add_node(name)
    child.add_value("r", str(color.r))
    child.add_value("g", str(color.g))
    child.add_value("b", str(color.b))


def _is_pair_list(value: Any) -> bool:
    return bool(value) and all(isinstance(item, tuple) and len(item) == 2 for item in value)


def _to_xml(node: XmlNode, name: str, value: Any) -> None:
    if hasattr(value, "to_xml"):
        value.to_xml(node)
    elif value is None:
        node.add_node(name).add_value("initialized", "no")
    elif isinstance(value, Color):
        _color_to_xml(node, name, value)
    elif isinstance(value, VChar):
        child = node.add_node(name)
        child.add_value("glyph", str(value.glyph))
        _color_to_xml(child, "foreground", value.foreground)
        _color_to_xml(child, "background", value.background)
    elif isinstance(value, dict):
        mapping = node.add_node(name)
        for key, item in value.items():
            entry = mapping.add_node(name)
            entry.add_value("key", to_string(key))
            _to_xml(entry, "v", item)
    elif isinstance(value, (set, frozenset)):
        container = node.add_node(name)
        for item in value:
            _to_xml(container.add_node("key"), "k", item)
    elif isinstance(value, (list, tuple)):
        vec = node.add_node(name)
        if _is_pair_list(value):
            for first, second in value:
                entry = vec.add_node(name)
                _to_xml(entry.add_node(f"{name}_first"), name, first)
                _to_xml(entry.add_node(f"{name}_second"), name, second)
        else:
            for item in value:
                _to_xml(vec, name, item)
    else:
        node.add_value(name, to_string(value))


def component_to_xml(node: XmlNode, *args: tuple[str, Any]) -> None:
    """Write each (name, value) pair into node, in order."""
    for arg in args:
        if not (isinstance(arg, tuple) and len(arg) == 2 and isinstance(arg[0], str)):
            raise TypeError(f"expected a (name, value) pair, got {arg!r}")
        _to_xml(node, arg[0], arg[1])


def _encode(value: Any) -> bytes:
    if isinstance(value, bool):
        return _BOOL.pack(value)
    if isinstance(value, int):
        try:
            return _INT.pack(value)
        except struct.error as exc:
            raise ValueError(f"integer out of 32-bit range: {value}") from exc
    if isinstance(value, float):
        return _FLOAT.pack(value)
    if isinstance(value, str):
        value = value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return _SIZE.pack(len(value)) + bytes(value)
    if isinstance(value, Color):
        return bytes((value.r, value.g, value.b))
    if isinstance(value, (list, tuple)):
        return _SIZE.pack(len(value)) + b"".join(_encode(item) for item in value)
    raise TypeError(f"cannot serialize value of type {type(value).__name__}")


def _reader(stream: IO[bytes]) -> Callable[[int], bytes]:
    def read(count: int) -> bytes:
        data = stream.read(count)
        if len(data) < count:
            raise EOFError(f"expected {count} bytes, got {len(data)}")
        return data

    return read


def _decode(read: Callable[[int], bytes], kind: Any) -> Any:
    if typing.get_origin(kind) is list:
        args = typing.get_args(kind)
        if len(args) != 1:
            raise TypeError(f"list kind needs one element type: {kind!r}")
        (size,) = _SIZE.unpack(read(_SIZE.size))
        return [_decode(read, args[0]) for _ in range(size)]
    if kind is bool:
        return _BOOL.unpack(read(_BOOL.size))[0]
    if kind is int:
        return _INT.unpack(read(_INT.size))[0]
    if kind is float:
        return _FLOAT.unpack(read(_FLOAT.size))[0]
    if kind in (str, bytes):
        (size,) = _SIZE.unpack(read(_SIZE.size))
        data = read(size)
        return data.decode("utf-8") if kind is str else data
    if kind is Color:
        return Color(*read(3))
    raise TypeError(f"cannot deserialize kind {kind!r}")


def serialize(stream: IO[bytes], value: Any) -> None:
    """Write value to a binary stream.

    Integers are 32-bit, floats 64-bit, sizes 64-bit, all little-endian.
    """
    stream.write(_encode(value))


def deserialize(stream: IO[bytes], kind: Any) -> Any:
    """Read a value of kind (e.g. int, str, Color, list[int]) from a binary stream."""
    return _decode(_reader(stream), kind)


class GzipFile:
    """A gzip-compressed file holding serialized values."""

    def __init__(self, filename: str | os.PathLike[str], mode: str) -> None:
        self.filename = os.fspath(filename)
        self.mode = mode if "b" in mode else mode + "b"
        try:
            self._file = gzip.open(self.filename, self.mode)
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"File {self.filename} does not exist.") from exc

    def serialize(self, value: Any) -> None:
        self._file.write(_encode(value))

    def serialize_vector_bool(self, values: Any) -> None:
        flags = [bool(v) for v in values]
        self._file.write(_SIZE.pack(len(flags)) + b"".join(_BOOL.pack(f) for f in flags))

    def deserialize(self, kind: Any) -> Any:
        return _decode(_reader(self._file), kind)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> GzipFile:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()