from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from article_content.models.article import Article
from article_content.models.nodes import NodeType
from article_content.parser import parse_markdown
from article_content.repositories.article_repository import (
    ArticleNotFoundError,
    ArticleRepository,
    DuplicateSlugError,
)
from article_content.store import ArticleStore, ArticleStoreError

_POST = "\n".join(
    [
        "# Why Systems Beat Heroics",
        "",
        "Most teams rely on **individual effort**. See [our framework](https://example.com/framework).",
        "",
        "- Document the process",
        "- Automate the checks",
        "",
        "```bash",
        "make audit",
        "```",
    ]
)


def _ticking_clock(start: datetime):
    current = [start]

    def clock() -> datetime:
        value = current[0]
        current[0] = value + timedelta(minutes=1)
        return value

    return clock


def test_save_markdown_persists_parsed_document(article_store: ArticleStore):
    saved = article_store.save_markdown("Why Systems Beat Heroics", _POST, category="strategy")

    stored = article_store.get_article("why-systems-beat-heroics")

    assert stored.id == saved.id
    assert stored.title == "Why Systems Beat Heroics"
    assert stored.category == "strategy"
    assert stored.content == parse_markdown(_POST)
    assert stored.content.to_json() == parse_markdown(_POST).to_json()
    assert [block.type for block in stored.content.blocks] == [
        NodeType.HEADING,
        NodeType.PARAGRAPH,
        NodeType.BULLET_LIST,
        NodeType.CODE_BLOCK,
    ]
    assert stored.reading_time == 1
    assert stored.excerpt and stored.excerpt.startswith("Why Systems Beat Heroics Most teams")
    assert stored.published is False
    assert stored.published_at is None


def test_render_article_returns_html(article_store: ArticleStore):
    article_store.save_markdown("Heroics", _POST, slug="heroics")

    html = article_store.render_article("heroics")

    assert html.startswith("<h1>Why Systems Beat Heroics</h1>")
    assert "<strong>individual effort</strong>" in html
    assert '<a href="https://example.com/framework" target="_blank" rel="noopener noreferrer">our framework</a>' in html
    assert '<div class="code-language">bash</div>' in html


def test_markdown_source_returns_canonical_markdown(article_store: ArticleStore):
    article_store.save_markdown("Heroics", _POST, slug="heroics")

    assert article_store.markdown_source("heroics") == _POST


def test_saving_again_updates_in_place(session_factory):
    start = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    store = ArticleStore(ArticleRepository(session_factory), clock=_ticking_clock(start))

    first = store.save_markdown("Roadmap", "Draft body", published=True)
    before = store.get_article("roadmap")
    second = store.save_markdown("Roadmap", "Final **body**", published=True, excerpt="Custom")
    after = store.get_article("roadmap")

    assert second.id == first.id
    assert after.published_at == before.published_at
    assert after.created_time == before.created_time
    assert after.last_edited_time > before.last_edited_time
    assert after.excerpt == "Custom"
    assert after.content == parse_markdown("Final **body**")
    assert len(store.list_articles()) == 1


def test_renaming_by_id_keeps_history(session_factory):
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    store = ArticleStore(ArticleRepository(session_factory), clock=_ticking_clock(start))

    first = store.save_markdown("Old", "body", published=True)
    before = store.get_article("old")
    renamed = store.save_markdown("New", "body", slug="new", published=True, article_id=first.id)
    after = store.get_article("new")

    assert renamed.id == first.id
    assert after.created_time == before.created_time
    assert after.published_at == before.published_at
    assert after.last_edited_time > before.last_edited_time
    assert [a.slug for a in store.list_articles()] == ["new"]
    with pytest.raises(ArticleNotFoundError):
        store.get_article("old")


def test_list_articles_filters_and_orders_newest_first(session_factory):
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    store = ArticleStore(ArticleRepository(session_factory), clock=_ticking_clock(start))

    store.save_markdown("Older", "a", published=True, category="ops")
    store.save_markdown("Draft", "b", published=False, category="ops")
    store.save_markdown("Newer", "c", published=True, category="ai")

    assert [a.slug for a in store.list_articles()] == ["newer", "draft", "older"]
    assert [a.slug for a in store.list_articles(published_only=True)] == ["newer", "older"]
    assert [a.slug for a in store.list_articles(category="ops")] == ["draft", "older"]
    assert [a.slug for a in store.list_articles(limit=1)] == ["newer"]


def test_delete_article(article_store: ArticleStore):
    article_store.save_markdown("Gone Soon", "body")

    article_store.delete_article("gone-soon")

    with pytest.raises(ArticleNotFoundError):
        article_store.get_article("gone-soon")
    with pytest.raises(ArticleNotFoundError):
        article_store.delete_article("gone-soon")


def test_title_without_slug_characters_is_rejected(article_store: ArticleStore):
    with pytest.raises(ArticleStoreError):
        article_store.save_markdown("!!!", "body")


def test_slug_owned_by_another_article_is_rejected(article_store: ArticleStore):
    article_store.save_markdown("Taken", "body")

    with pytest.raises(DuplicateSlugError):
        article_store.save_markdown("Taken", "other body", article_id=uuid4())


def test_repository_stores_unknown_nodes_verbatim(repository: ArticleRepository):
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    content = {
        "type": "document",
        "content": [
            {"type": "callout", "attrs": {"tone": "info"}, "content": [{"type": "text", "text": "Note"}]},
        ],
    }
    article = Article.model_validate(
        {
            "id": uuid4(),
            "slug": "legacy",
            "title": "Legacy",
            "content": content,
            "created_time": now,
            "last_edited_time": now,
        }
    )

    repository.upsert_article(article)
    loaded = repository.get_by_slug("legacy")

    assert loaded is not None
    assert loaded.content.to_json() == content
    assert repository.get_article(article.id) == loaded
