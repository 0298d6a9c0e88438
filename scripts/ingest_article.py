"""Parse a Markdown article, persist it, and print the stored result."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from article_content.db.engine import create_engine, create_session_factory, database_url_from_env
from article_content.db.schema import create_all
from article_content.models.nodes import Node
from article_content.renderers import HtmlRenderer, MarkdownRenderer
from article_content.store import create_article_store


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ingest a Markdown article into the article store.")
    parser.add_argument("path", type=Path, help="Path to a Markdown document.")
    parser.add_argument("--title", help="Article title (defaults to the file stem).")
    parser.add_argument("--slug", help="Explicit slug (defaults to one derived from the title).")
    parser.add_argument("--category", help="Optional article category.")
    parser.add_argument("--publish", action="store_true", help="Mark the article as published.")
    parser.add_argument(
        "--database-url",
        default=database_url_from_env(),
        help="SQLAlchemy URL; falls back to ARTICLE_CONTENT_DATABASE_URL / DATABASE_URL, then in-memory SQLite.",
    )
    parser.add_argument(
        "--format",
        choices=("tree", "html", "markdown", "json"),
        default="tree",
        help="What to print after ingesting.",
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("ingest_article")

    engine = create_engine(args.database_url) if args.database_url else create_engine()
    create_all(engine)
    store = create_article_store(create_session_factory(engine))

    source = args.path.read_text(encoding="utf-8")
    title = args.title or args.path.stem.replace("-", " ").replace("_", " ").title()
    article = store.save_markdown(
        title,
        source,
        slug=args.slug,
        category=args.category,
        published=args.publish,
    )
    logger.info("Persisted article %s (%s), %d min read", article.slug, article.id, article.reading_time)

    stored = store.get_article(article.slug)
    if args.format == "html":
        print(HtmlRenderer().render(stored.content))
    elif args.format == "markdown":
        print(MarkdownRenderer().render(stored.content))
    elif args.format == "json":
        print(json.dumps(stored.content.to_json(), indent=2))
    else:
        print(f"{stored.title} ({stored.slug})")
        for block in stored.content.blocks:
            _print_tree(block, indent=2)


def _print_tree(node: Node, indent: int) -> None:
    prefix = " " * indent
    label = ""
    if node.text is not None:
        first_line = node.text.splitlines()[0] if node.text else ""
        label = f": {first_line[:60]!r}"
    elif node.attrs:
        label = f" {dict(node.attrs)}"
    print(f"{prefix}- {node.type}{label}")
    for child in node.children:
        _print_tree(child, indent=indent + 2)


if __name__ == "__main__":
    main()
