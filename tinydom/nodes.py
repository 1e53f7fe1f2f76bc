"""The document object model: nodes, elements, text and their kin."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum
from typing import Any, TextIO

from tinydom.attribute import Attribute
from tinydom.text import Cursor, escape, is_whitespace

_INDENT = "    "


class NodeType(IntEnum):
    """The kinds of node a document can hold."""

    DOCUMENT = 0
    ELEMENT = 1
    COMMENT = 2
    UNKNOWN = 3
    TEXT = 4
    DECLARATION = 5


def _matches(node: Node, value: str | None) -> bool:
    return value is None or node.value == value


class Node:
    """A node of the tree: it has a value, a parent and ordered children.

    The meaning of value depends on the kind of node: the file name of a
    document, the tag name of an element, the body of a comment, the
    contents of an unknown tag, or the string of a text node.
    """

    def __init__(self, node_type: NodeType | int, value: str = "") -> None:
        self.node_type = NodeType(node_type)
        self.value = value
        self.parent: Node | None = None
        self.user_data: Any = None
        self.location = Cursor()
        self._children: list[Node] = []

    @property
    def row(self) -> int:
        """1-based row in the source text; 0 or less when unknown."""
        return self.location.row + 1

    @property
    def column(self) -> int:
        """1-based column in the source text; 0 or less when unknown."""
        return self.location.col + 1

    # Navigation

    def _position(self, child: Node) -> int:
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return index
        raise ValueError("node is not a child of this node")

    def _following(self) -> list[Node]:
        if self.parent is None:
            return []
        siblings = self.parent._children
        return siblings[self.parent._position(self) + 1:]

    def _preceding(self) -> Iterable[Node]:
        if self.parent is None:
            return []
        siblings = self.parent._children
        return reversed(siblings[:self.parent._position(self)])

    def children(self, value: str | None = None) -> Iterator[Node]:
        """Yield the children in order, only those with the given value if one is given."""
        for child in list(self._children):
            if _matches(child, value):
                yield child

    def __iter__(self) -> Iterator[Node]:
        return self.children()

    def first_child(self, value: str | None = None) -> Node | None:
        return next(self.children(value), None)

    def last_child(self, value: str | None = None) -> Node | None:
        return next((c for c in reversed(self._children) if _matches(c, value)), None)

    def next_sibling(self, value: str | None = None) -> Node | None:
        return next((n for n in self._following() if _matches(n, value)), None)

    def previous_sibling(self, value: str | None = None) -> Node | None:
        return next((n for n in self._preceding() if _matches(n, value)), None)

    def first_child_element(self, value: str | None = None) -> Element | None:
        return next((c for c in self.children(value) if isinstance(c, Element)), None)

    def next_sibling_element(self, value: str | None = None) -> Element | None:
        return next(
            (n for n in self._following() if isinstance(n, Element) and _matches(n, value)),
            None,
        )

    # Modification

    def link_end_child(self, node: Node) -> Node:
        """Append node itself (not a copy) as the last child and return it."""
        if node.parent is not None:
            old_parent = node.parent
            del old_parent._children[old_parent._position(node)]
        node.parent = self
        self._children.append(node)
        return node

    def insert_end_child(self, node: Node) -> Node:
        """Append a copy of node as the last child and return the copy."""
        return self.link_end_child(node.clone())

    def insert_before_child(self, before: Node, node: Node) -> Node:
        """Insert a copy of node before the child `before`; ValueError if it is not a child."""
        index = self._position(before)
        copy = node.clone()
        copy.parent = self
        self._children.insert(index, copy)
        return copy

    def insert_after_child(self, after: Node, node: Node) -> Node:
        """Insert a copy of node after the child `after`; ValueError if it is not a child."""
        index = self._position(after)
        copy = node.clone()
        copy.parent = self
        self._children.insert(index + 1, copy)
        return copy

    def replace_child(self, old: Node, new: Node) -> Node:
        """Put a copy of new in place of the child old and return the copy."""
        index = self._position(old)
        copy = new.clone()
        copy.parent = self
        self._children[index] = copy
        old.parent = None
        return copy

    def remove_child(self, node: Node) -> None:
        """Remove a child; ValueError if node is not a child of this node."""
        del self._children[self._position(node)]
        node.parent = None

    def clear(self) -> None:
        """Remove all children."""
        for child in self._children:
            child.parent = None
        self._children.clear()

    def no_children(self) -> bool:
        return not self._children

    def get_document(self) -> Node | None:
        """The document this node lives in, or None."""
        node: Node | None = self
        while node is not None:
            if node.node_type is NodeType.DOCUMENT:
                return node
            node = node.parent
        return None

    # Copying

    def _blank(self) -> Node:
        return Node(self.node_type)

    def clone(self) -> Node:
        """Return a deep copy of this node, detached from any parent."""
        copy = self._blank()
        copy.value = self.value
        copy.user_data = self.user_data
        for child in self._children:
            copy.link_end_child(child.clone())
        return copy

    # Output

    def write(self, stream: TextIO, depth: int = 0) -> None:
        """Write the children in readable form, each followed by a newline."""
        for child in self._children:
            child.write(stream, depth)
            stream.write("\n")

    def to_xml(self) -> str:
        """Return compact markup without added white space."""
        return "".join(child.to_xml() for child in self._children)

    def __str__(self) -> str:
        return self.to_xml()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Element(Node):
    """A tagged element with attributes and children."""

    def __init__(self, value: str = "") -> None:
        super().__init__(NodeType.ELEMENT, value)
        self._attributes: dict[str, Attribute] = {}

    def attribute(self, name: str) -> str | None:
        """The value of the named attribute, or None if there is none."""
        found = self._attributes.get(name)
        return None if found is None else found.value

    def set_attribute(self, name: str, value: str | int) -> None:
        """Create the attribute, or change its value if it already exists."""
        text = value if isinstance(value, str) else str(value)
        found = self._attributes.get(name)
        if found is None:
            self._attributes[name] = Attribute(name, text)
        else:
            found.value = text

    def remove_attribute(self, name: str) -> None:
        """Delete the named attribute if present."""
        self._attributes.pop(name, None)

    def _find(self, name: str) -> Attribute:
        found = self._attributes.get(name)
        if found is None:
            raise KeyError(name)
        return found

    def query_int_attribute(self, name: str) -> int:
        """The attribute as an integer; KeyError if missing, ValueError if not an integer."""
        return self._find(name).query_int_value()

    def query_double_attribute(self, name: str) -> float:
        """The attribute as a number; KeyError if missing, ValueError if not a number."""
        return self._find(name).query_double_value()

    def attributes(self) -> list[Attribute]:
        """The attributes in the order they were added."""
        return list(self._attributes.values())

    def clone(self) -> Element:
        copy = Element(self.value)
        copy.user_data = self.user_data
        for attrib in self._attributes.values():
            copy.set_attribute(attrib.name, attrib.value)
        for child in self._children:
            copy.link_end_child(child.clone())
        return copy

    def write(self, stream: TextIO, depth: int = 0) -> None:
        """Write the element indented, one child node per line."""
        stream.write(_INDENT * depth)
        stream.write(f"<{self.value}")
        for attrib in self._attributes.values():
            stream.write(" ")
            attrib.write(stream, depth)
        children = self._children
        if not children:
            stream.write(" />")
        elif len(children) == 1 and isinstance(children[0], Text):
            stream.write(">")
            children[0].write(stream, depth + 1)
            stream.write(f"</{self.value}>")
        else:
            stream.write(">")
            for child in children:
                if not isinstance(child, Text):
                    stream.write("\n")
                child.write(stream, depth + 1)
            stream.write("\n")
            stream.write(_INDENT * depth)
            stream.write(f"</{self.value}>")

    def to_xml(self) -> str:
        parts = [f"<{self.value}"]
        parts.extend(f" {attrib.to_xml()}" for attrib in self._attributes.values())
        if self._children:
            parts.append(">")
            parts.extend(child.to_xml() for child in self._children)
            parts.append(f"</{self.value}>")
        else:
            parts.append(" />")
        return "".join(parts)


class Comment(Node):
    """An XML comment; its value is the comment body."""

    def __init__(self, value: str = "") -> None:
        super().__init__(NodeType.COMMENT, value)

    def _blank(self) -> Node:
        return Comment()

    def write(self, stream: TextIO, depth: int = 0) -> None:
        stream.write(_INDENT * depth)
        stream.write(f"<!--{self.value}-->")

    def to_xml(self) -> str:
        return f"<!--{escape(self.value)}-->"


class Text(Node):
    """Character data inside an element."""

    def __init__(self, value: str = "") -> None:
        super().__init__(NodeType.TEXT, value)

    def _blank(self) -> Node:
        return Text()

    def blank(self) -> bool:
        """True if the text is empty or only white space."""
        return all(is_whitespace(ch) for ch in self.value)

    def write(self, stream: TextIO, depth: int = 0) -> None:
        stream.write(escape(self.value))

    def to_xml(self) -> str:
        return escape(self.value)


class Declaration(Node):
    """The <?xml ...?> declaration with its version, encoding and standalone fields."""

    def __init__(self, version: str = "", encoding: str = "", standalone: str = "") -> None:
        super().__init__(NodeType.DECLARATION, "")
        self.version = version
        self.encoding = encoding
        self.standalone = standalone

    def _fields(self) -> list[tuple[str, str]]:
        return [
            (key, value)
            for key, value in (
                ("version", self.version),
                ("encoding", self.encoding),
                ("standalone", self.standalone),
            )
            if value
        ]

    def clone(self) -> Declaration:
        copy = Declaration(self.version, self.encoding, self.standalone)
        copy.value = self.value
        copy.user_data = self.user_data
        return copy

    def write(self, stream: TextIO, depth: int = 0) -> None:
        stream.write("<?xml ")
        for key, value in self._fields():
            stream.write(f'{key}="{value}" ')
        stream.write("?>")

    def to_xml(self) -> str:
        body = "".join(f'{key}="{escape(value)}" ' for key, value in self._fields())
        return f"<?xml {body}?>"


class Unknown(Node):
    """A tag the parser does not recognise, kept as its raw contents."""

    def __init__(self, value: str = "") -> None:
        super().__init__(NodeType.UNKNOWN, value)

    def _blank(self) -> Node:
        return Unknown()

    def write(self, stream: TextIO, depth: int = 0) -> None:
        stream.write(_INDENT * depth)
        stream.write(self.value)

    def to_xml(self) -> str:
        return f"<{self.value}>"