"""Unit tests for article and request models."""

import pytest
from pydantic import ValidationError

from pubmed_proxy.models.model_api import SearchRequest
from pubmed_proxy.models.model_article import ArticleDetail, ArticleSummary


def make_summary(**overrides) -> ArticleSummary:
    fields = {
        "id": "123",
        "title": "T",
        "authors": "A",
        "journal": "J",
        "pub_date": "2020",
        "abstract": "no abstract",
    }
    fields.update(overrides)
    return ArticleSummary(**fields)


def test_url_derived_from_id():
    assert make_summary(id="42").url == "https://pubmed.ncbi.nlm.nih.gov/42/"


def test_serializes_with_camel_case_pub_date():
    dumped = make_summary().model_dump(by_alias=True)

    assert dumped["pubDate"] == "2020"
    assert dumped["doi"] is None
    assert dumped["url"] == "https://pubmed.ncbi.nlm.nih.gov/123/"


def test_articles_are_frozen():
    summary = make_summary()

    with pytest.raises(ValidationError):
        summary.title = "changed"


def test_detail_keywords_default_empty():
    detail = ArticleDetail(
        id="1",
        title="T",
        authors="A",
        journal="J",
        pubDate="2020",
        abstract="x",
    )

    assert detail.keywords == []


class TestSearchRequest:
    def test_defaults(self):
        request = SearchRequest(query="q")

        assert request.max_results == 10
        assert request.sort_by == "relevance"

    def test_wire_aliases(self):
        request = SearchRequest.model_validate(
            {"query": "q", "maxResults": 25, "sortBy": "date"}
        )

        assert request.max_results == 25
        assert request.sort_by == "date"

    def test_unknown_sort_falls_back_to_relevance(self):
        request = SearchRequest.model_validate({"query": "q", "sortBy": "citations"})

        assert request.sort_by == "relevance"

    @pytest.mark.parametrize("max_results", [0, 101])
    def test_max_results_bounded(self, max_results):
        with pytest.raises(ValidationError):
            SearchRequest(query="q", max_results=max_results)
