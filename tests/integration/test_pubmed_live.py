"""Integration tests against the live NCBI E-utilities API."""

import pytest

from pubmed_proxy.errors import NotFoundError
from pubmed_proxy.models.model_api import SearchRequest
from pubmed_proxy.services.articles import get_article, search_articles

pytestmark = pytest.mark.integration

# Semaglutide NASH phase 2 trial (Newsome et al., NEJM 2021)
KNOWN_PMID = "33185364"


async def test_search_articles(pubmed_client):
    articles = await search_articles(
        pubmed_client, SearchRequest(query="semaglutide NASH", max_results=3)
    )

    assert 0 < len(articles) <= 3
    for article in articles:
        assert article.id.isdigit()
        assert article.url == f"https://pubmed.ncbi.nlm.nih.gov/{article.id}/"


async def test_search_sorted_by_date(pubmed_client):
    pmids = await pubmed_client.search("metformin", max_results=5, sort_by="date")

    assert len(pmids) == 5


async def test_get_article(pubmed_client):
    article = await get_article(pubmed_client, KNOWN_PMID)

    assert article.id == KNOWN_PMID
    assert "semaglutide" in article.title.lower()
    assert article.doi == "10.1056/NEJMoa2028395"
    assert article.pub_date == "2021"
    assert article.authors.startswith("Newsome Philip N")


async def test_unknown_article_not_found(pubmed_client):
    with pytest.raises(NotFoundError):
        await get_article(pubmed_client, "999999999999")
