from .renderer import HtmlRenderer

__all__ = ["HtmlRenderer"]
