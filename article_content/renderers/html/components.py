"""HTML renderer component implementations.

Components decide structure only (which element a node becomes); styling
is left to the page that embeds the output.
"""

from __future__ import annotations

from html import escape
from typing import Callable

from article_content.models.nodes import DEFAULT_CODE_LANGUAGE, Mark, MarkType, Node, NodeType
from article_content.renderers.base import RenderOptions, RendererComponent, code_text, heading_level
from article_content.renderers.context import RenderContext


class BaseComponent(RendererComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:  # pragma: no cover - abstract
        raise NotImplementedError


class ElementComponent(BaseComponent):
    """Wraps rendered children in a single element."""

    def __init__(self, tag: str, *, separator: str = "") -> None:
        self.tag = tag
        self.separator = separator

    def render_node(self, node: Node, ctx: RenderContext) -> str:
        inner = self.separator.join(ctx.render_children(node))
        return f"<{self.tag}>{inner}</{self.tag}>"


class HeadingComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        level = heading_level(node, ctx.options)
        inner = "".join(ctx.render_children(node))
        return f"<h{level}>{inner}</h{level}>"


class CodeBlockComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        language = node.attr("language") or DEFAULT_CODE_LANGUAGE
        body = escape(code_text(node), quote=False)
        if language == DEFAULT_CODE_LANGUAGE:
            return f"<pre><code>{body}</code></pre>"
        lang = escape(str(language))
        code = f'<pre><code class="language-{lang}">{body}</code></pre>'
        if not ctx.options.show_code_language:
            return code
        return f'<div class="code-block"><div class="code-language">{lang}</div>{code}</div>'


class HorizontalRuleComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:  # noqa: ARG002
        return "<hr>"


class TextComponent(BaseComponent):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        content = escape(node.text or "", quote=False)
        for mark in node.mark_set:
            wrap = _MARK_WRAPPERS.get(mark.type)
            if wrap is not None:
                content = wrap(content, mark, ctx.options)
        return content


class GenericComponent(BaseComponent):
    """Drops the unknown wrapper and renders whatever children it has."""

    def render_node(self, node: Node, ctx: RenderContext) -> str:
        return "".join(ctx.render_children(node))


# ---------------------------------------------------------------------------
# Mark helpers


def _link(content: str, mark: Mark, options: RenderOptions) -> str:
    attrs = mark.attrs or {}
    parts = [f'href="{escape(str(attrs.get("href") or ""))}"']
    target = attrs.get("target") or "_blank"
    parts.append(f'target="{escape(str(target))}"')
    if options.link_rel:
        parts.append(f'rel="{escape(options.link_rel)}"')
    return f"<a {' '.join(parts)}>{content}</a>"


def _wrap(tag: str) -> Callable[[str, Mark, RenderOptions], str]:
    def wrap(content: str, mark: Mark, options: RenderOptions) -> str:  # noqa: ARG001
        return f"<{tag}>{content}</{tag}>"

    return wrap


_MARK_WRAPPERS: dict[str, Callable[[str, Mark, RenderOptions], str]] = {
    MarkType.BOLD.value: _wrap("strong"),
    MarkType.ITALIC.value: _wrap("em"),
    MarkType.CODE.value: _wrap("code"),
    MarkType.LINK.value: _link,
    MarkType.STRIKE.value: _wrap("s"),
    MarkType.UNDERLINE.value: _wrap("u"),
}


DEFAULT_COMPONENTS: dict[str, RendererComponent] = {
    NodeType.HEADING.value: HeadingComponent(),
    NodeType.PARAGRAPH.value: ElementComponent("p"),
    NodeType.BULLET_LIST.value: ElementComponent("ul"),
    NodeType.ORDERED_LIST.value: ElementComponent("ol"),
    NodeType.LIST_ITEM.value: ElementComponent("li"),
    NodeType.BLOCKQUOTE.value: ElementComponent("blockquote"),
    NodeType.CODE_BLOCK.value: CodeBlockComponent(),
    NodeType.HORIZONTAL_RULE.value: HorizontalRuleComponent(),
    NodeType.TEXT.value: TextComponent(),
}


__all__ = [
    "DEFAULT_COMPONENTS",
    "GenericComponent",
]
