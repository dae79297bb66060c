"""A minimal line-oriented XML-like tree format with reader and writer."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Callable, Iterator

from roguekit.colors import Color
from roguekit.vchar import VChar

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def from_string(value: str, kind: Callable[[str], Any] = str) -> Any:
    """Convert a stored string to kind, reading a leading number for numeric kinds."""
    if kind is str:
        return value
    if kind in (bool, int):
        match = _INT_RE.match(value)
        if match is None:
            raise ValueError(f"cannot read {kind.__name__} from {value!r}")
        number = int(match.group(1))
        return number != 0 if kind is bool else number
    if kind is float:
        match = _FLOAT_RE.match(value)
        if match is None:
            raise ValueError(f"cannot read float from {value!r}")
        return float(match.group(1))
    return kind(value)


def _uint8(value: str) -> int:
    return from_string(value, int) & 0xFF


@dataclass
class XmlNode:
    """A named node holding key/value pairs and child nodes."""

    name: str = ""
    depth: int = 0
    children: list[XmlNode] = field(default_factory=list)
    values: list[tuple[str, str]] = field(default_factory=list)

    def add_node(self, name: str) -> XmlNode:
        """Create a child one level deeper and return it."""
        child = XmlNode(name, self.depth + 1)
        self.children.append(child)
        return child

    def add_child(self, node: XmlNode) -> None:
        self.children.append(node)

    def indent(self) -> str:
        return " " * self.depth

    def _lines(self) -> Iterator[str]:
        pad = self.indent()
        yield f"{pad}<{self.name}>\n"
        for key, value in self.values:
            yield f"{pad} <{key}:value>{value}</{key}:value>\n"
        for child in self.children:
            yield from child._lines()
        yield f"{pad}</{self.name}>\n"

    def save(self, stream: IO[str]) -> None:
        stream.writelines(self._lines())

    def dump(self) -> str:
        return "".join(self._lines())

    def add_value(self, key: str, value: str) -> None:
        self.values.append((key, value))

    def count(self) -> int:
        """Number of nodes below this one."""
        return sum(1 + child.count() for child in self.children)

    def find(self, name: str) -> XmlNode | None:
        return next((child for child in self.children if child.name == name), None)

    def _child(self, name: str) -> XmlNode:
        node = self.find(name)
        if node is None:
            raise KeyError(f"Child not found:{name}")
        return node

    def val(self, key: str, kind: Callable[[str], Any] = str) -> Any:
        for k, v in self.values:
            if k == key:
                return from_string(v, kind)
        raise KeyError(f"Key not found:{key}")

    def iterate_child(self, name: str) -> Iterator[XmlNode]:
        """Yield the children of the first child called name."""
        yield from self._child(name).children

    def color(self, name: str) -> Color:
        node = self._child(name)
        return Color(
            node.val("r", _uint8),
            node.val("g", _uint8),
            node.val("b", _uint8),
        )

    def vchar(self) -> VChar:
        return VChar(
            self.val("glyph", int),
            self.color("foreground"),
            self.color("background"),
        )


def _is_path(target: Any) -> bool:
    return isinstance(target, (str, os.PathLike))


class XmlWriter:
    """Builds a tree under a root node and writes it to a file or stream."""

    def __init__(self, target: str | os.PathLike[str] | IO[str], root_name: str) -> None:
        self.root = XmlNode(root_name, 0)
        if _is_path(target):
            self._path: Path | None = Path(target)
            self._stream: IO[str] | None = None
            if self._path.exists():
                self._path.unlink()
            self._path.touch()
        else:
            self._path = None
            self._stream = target

    def commit(self) -> None:
        if self._path is not None:
            with self._path.open("a", encoding="utf-8", newline="") as stream:
                self.root.save(stream)
        else:
            self.root.save(self._stream)

    def add_node(self, name: str) -> XmlNode:
        return self.root.add_node(name)


class XmlReader:
    """Parses a file or stream written by XmlWriter."""

    def __init__(self, source: str | os.PathLike[str] | IO[str]) -> None:
        self._root = XmlNode()
        if _is_path(source):
            path = Path(source)
            if not path.exists():
                raise FileNotFoundError(f"File not found: {path}")
            with path.open("r", encoding="utf-8", newline="") as stream:
                self._load(stream)
        else:
            self._load(source)

    def get(self) -> XmlNode:
        return self._root

    def _load(self, stream: IO[str]) -> None:
        root = self._root
        stack: list[XmlNode] = []
        first_line = True
        for raw in stream:
            line = raw.lstrip().replace("\n", "")
            if first_line:
                root.name = _strip_braces(line)
                first_line = False
            elif line == f"</{root.name}>":
                pass
            elif not stack:
                stack.append(XmlNode(_strip_braces(line)))
            elif line == f"</{stack[-1].name}>":
                current = stack.pop()
                (stack[-1] if stack else root).add_child(current)
            elif ":value>" not in line:
                stack.append(XmlNode(_strip_braces(line)))
            else:
                close = line.find(">")
                key = _strip_braces(line[:close]).replace(":value", "")
                value = line[close + 1:]
                end = value.find("<")
                if end >= 0:
                    value = value[:end]
                stack[-1].add_value(key, value)


def _strip_braces(text: str) -> str:
    return text.replace("<", "").replace(">", "")