"""Document tree models shared by the parser and the renderers."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class NodeType(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "codeBlock"
    HORIZONTAL_RULE = "horizontalRule"
    TEXT = "text"


class MarkType(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"
    STRIKE = "strike"
    UNDERLINE = "underline"


DEFAULT_CODE_LANGUAGE = "plaintext"
DOCUMENT_TYPE = "document"
_LEGACY_DOCUMENT_TYPES = {"doc"}


def _read_only(value: dict[str, Any] | None) -> Mapping[str, Any] | None:
    # frozen=True does not reach into dict contents.
    return None if value is None else MappingProxyType(dict(value))


class Mark(BaseModel):
    """Inline formatting annotation attached to a text node."""

    type: str
    attrs: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("attrs")
    @classmethod
    def _freeze_attrs(cls, value: dict[str, Any] | None) -> Mapping[str, Any] | None:
        return _read_only(value)

    @field_serializer("attrs")
    def _dump_attrs(self, value: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return None if value is None else dict(value)


class Node(BaseModel):
    """One element of the document tree, tagged by ``type``.

    ``type`` is kept as a plain string so stored documents written by newer
    editors (with node types this package does not know) still load.
    """

    type: str
    attrs: dict[str, Any] | None = None
    content: tuple[Node, ...] | None = None
    text: str | None = None
    marks: tuple[Mark, ...] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("attrs")
    @classmethod
    def _freeze_attrs(cls, value: dict[str, Any] | None) -> Mapping[str, Any] | None:
        return _read_only(value)

    @field_serializer("attrs")
    def _dump_attrs(self, value: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return None if value is None else dict(value)

    @property
    def children(self) -> tuple[Node, ...]:
        return self.content or ()

    @property
    def mark_set(self) -> tuple[Mark, ...]:
        return self.marks or ()

    def attr(self, name: str, default: Any = None) -> Any:
        if not self.attrs:
            return default
        return self.attrs.get(name, default)

    def walk(self) -> Iterator[Node]:
        """Yield this node and every descendant in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


class Document(BaseModel):
    """Root container produced by the parser and consumed by renderers."""

    type: str = DOCUMENT_TYPE
    content: tuple[Node, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("type")
    @classmethod
    def _normalise_root_type(cls, value: str) -> str:
        if value in _LEGACY_DOCUMENT_TYPES:
            return DOCUMENT_TYPE
        if value != DOCUMENT_TYPE:
            raise ValueError(f"Unsupported document root type: {value!r}")
        return value

    @field_validator("content", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def blocks(self) -> tuple[Node, ...]:
        return self.content

    def walk(self) -> Iterator[Node]:
        for block in self.content:
            yield from block.walk()

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-compatible shape stored by the persistence layer."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | None) -> Document:
        if data is None:
            return cls()
        return cls.model_validate(dict(data))


# ---------------------------------------------------------------------------
# Constructors


def text(value: str, marks: Sequence[Mark] | None = None) -> Node:
    return Node(type=NodeType.TEXT.value, text=value, marks=tuple(marks) if marks else None)


def mark(mark_type: MarkType | str, **attrs: Any) -> Mark:
    name = mark_type.value if isinstance(mark_type, MarkType) else mark_type
    return Mark(type=name, attrs=attrs or None)


def link_mark(href: str, target: str = "_blank") -> Mark:
    return mark(MarkType.LINK, href=href, target=target)


def heading(level: int, content: Sequence[Node]) -> Node:
    return Node(type=NodeType.HEADING.value, attrs={"level": level}, content=tuple(content))


def paragraph(content: Sequence[Node]) -> Node:
    return Node(type=NodeType.PARAGRAPH.value, content=tuple(content))


def list_item(content: Sequence[Node]) -> Node:
    return Node(type=NodeType.LIST_ITEM.value, content=tuple(content))


def bullet_list(items: Sequence[Node]) -> Node:
    return Node(type=NodeType.BULLET_LIST.value, content=tuple(items))


def ordered_list(items: Sequence[Node]) -> Node:
    return Node(type=NodeType.ORDERED_LIST.value, content=tuple(items))


def blockquote(content: Sequence[Node]) -> Node:
    return Node(type=NodeType.BLOCKQUOTE.value, content=tuple(content))


def code_block(body: str, language: str = DEFAULT_CODE_LANGUAGE) -> Node:
    return Node(
        type=NodeType.CODE_BLOCK.value,
        attrs={"language": language},
        content=(text(body),),
    )


def horizontal_rule() -> Node:
    return Node(type=NodeType.HORIZONTAL_RULE.value)


__all__ = [
    "DEFAULT_CODE_LANGUAGE",
    "DOCUMENT_TYPE",
    "Document",
    "Mark",
    "MarkType",
    "Node",
    "NodeType",
    "blockquote",
    "bullet_list",
    "code_block",
    "heading",
    "horizontal_rule",
    "link_mark",
    "list_item",
    "mark",
    "ordered_list",
    "paragraph",
    "text",
]
