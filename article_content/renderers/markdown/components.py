"""Markdown renderer component implementations."""

from __future__ import annotations

from article_content.models.nodes import DEFAULT_CODE_LANGUAGE, Mark, MarkType, Node, NodeType
from article_content.renderers.base import RendererComponent, code_text, heading_level
from article_content.renderers.context import RenderContext


class BaseComponent(RendererComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:  # pragma: no cover - abstract
        raise NotImplementedError


class HeadingComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        prefix = "#" * heading_level(node, ctx.options)
        return f"{prefix} {_inline(node, ctx)}"


class ParagraphComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        return _inline(node, ctx)


class BulletListComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        # Empty items keep the trailing space so the marker still reads as a list line.
        return "\n".join(f"- {item}" for item in ctx.render_children(node))


class OrderedListComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        items = ctx.render_children(node)
        return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))


class ListItemComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        # List items hold a single line in this format.
        return " ".join(section for section in ctx.render_children(node) if section)


class BlockquoteComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        body = " ".join(section for section in ctx.render_children(node) if section)
        return f"> {body}" if body else ">"


class CodeBlockComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:  # noqa: ARG002
        language = node.attr("language") or DEFAULT_CODE_LANGUAGE
        fence = "```" if language == DEFAULT_CODE_LANGUAGE else f"```{language}"
        return "\n".join([fence, code_text(node), "```"])


class HorizontalRuleComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:  # noqa: ARG002
        return "---"


class TextComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:  # noqa: ARG002
        content = node.text or ""
        for mark in node.mark_set:
            content = _apply_mark(content, mark)
        return content


class GenericComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        return ctx.engine.join_blocks(ctx.render_children(node))


# ---------------------------------------------------------------------------
# Helpers


_MARK_DELIMITERS = {
    MarkType.BOLD.value: "**",
    MarkType.ITALIC.value: "*",
    MarkType.CODE.value: "`",
    MarkType.STRIKE.value: "~~",
}


def _inline(node: Node, ctx: RenderContext) -> str:
    return "".join(ctx.render_children(node))


def _apply_mark(content: str, mark: Mark) -> str:
    delimiter = _MARK_DELIMITERS.get(mark.type)
    if mark.type == MarkType.BOLD.value and "**" in content:
        # "**" inside the body would close a "**" pair early.
        delimiter = "__"
    if delimiter is not None:
        return f"{delimiter}{content}{delimiter}"
    if mark.type == MarkType.LINK.value:
        href = (mark.attrs or {}).get("href") or ""
        return f"[{content}]({href})"
    if mark.type == MarkType.UNDERLINE.value:
        return f"<u>{content}</u>"
    return content


DEFAULT_COMPONENTS: dict[str, RendererComponent] = {
    NodeType.HEADING.value: HeadingComponent(),
    NodeType.PARAGRAPH.value: ParagraphComponent(),
    NodeType.BULLET_LIST.value: BulletListComponent(),
    NodeType.ORDERED_LIST.value: OrderedListComponent(),
    NodeType.LIST_ITEM.value: ListItemComponent(),
    NodeType.BLOCKQUOTE.value: BlockquoteComponent(),
    NodeType.CODE_BLOCK.value: CodeBlockComponent(),
    NodeType.HORIZONTAL_RULE.value: HorizontalRuleComponent(),
    NodeType.TEXT.value: TextComponent(),
}


__all__ = [
    "DEFAULT_COMPONENTS",
    "GenericComponent",
]
