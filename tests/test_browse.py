#!/usr/bin/env python
"""Browse: 搜索与分页 - 单元测试"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from scijournal.browse import find_group, paginate, search_articles
from scijournal.models import Article, ArticleGroup


def _group(n=14):
    articles = [
        Article(title=f"Paper {i}", link=f"https://x/{i}", description="innovation" if i % 2 else "patents",
                publication_date="2025-01-01")
        for i in range(n)
    ]
    return ArticleGroup(journal_name="Technovation", articles=articles)


class TestSearch:
    """测试搜索"""

    def test_matches_description_case_insensitive(self):
        assert len(search_articles(_group().articles, "INNOVATION")) == 7

    def test_matches_title(self):
        assert [a.title for a in search_articles(_group().articles, "paper 13")] == ["Paper 13"]

    def test_blank_query_returns_all(self):
        assert len(search_articles(_group().articles, "  ")) == 14


class TestPaginate:
    """测试分页"""

    def test_first_page(self):
        page = paginate(_group(), page=1, per_page=6)
        assert page.total == 14
        assert page.total_pages == 3
        assert [a.title for a in page.articles] == [f"Paper {i}" for i in range(6)]

    def test_last_page_partial(self):
        page = paginate(_group(), page=3, per_page=6)
        assert len(page.articles) == 2

    def test_past_end_is_empty(self):
        page = paginate(_group(), page=9, per_page=6)
        assert page.articles == []
        assert page.total_pages == 3

    def test_with_query(self):
        page = paginate(_group(), page=1, per_page=6, query="patents")
        assert page.total == 7
        assert page.total_pages == 2

    def test_empty_group_has_one_page(self):
        page = paginate(ArticleGroup(journal_name="A"), page=1)
        assert page.total == 0
        assert page.total_pages == 1

    def test_serializes_camel_case(self):
        data = paginate(_group(), per_page=6).model_dump(by_alias=True)
        assert {"journalName", "perPage", "totalPages"} <= set(data)


class TestFindGroup:
    def test_case_insensitive(self):
        assert find_group([_group()], "technovation").journal_name == "Technovation"

    def test_missing(self):
        assert find_group([_group()], "other") is None
