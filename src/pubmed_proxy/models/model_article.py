"""
Pydantic models for normalized PubMed articles.

These are the data contracts between the normalizers and the HTTP layer.
The HTTP layer never sees raw esummary/efetch payloads.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from pubmed_proxy.constants import PUBMED_ARTICLE_URL


def article_url(pmid: str) -> str:
    """Return the public PubMed page for a PMID."""
    return PUBMED_ARTICLE_URL.format(pmid=pmid)


class ArticleSummary(BaseModel):
    """A PubMed article as returned by a search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str  # PMID, e.g. "38472913"
    title: str
    authors: str  # display string, "A, B, C"
    journal: str
    pub_date: str = Field(alias="pubDate")
    abstract: str
    doi: str | None = None

    @computed_field
    @property
    def url(self) -> str:
        return article_url(self.id)


class ArticleDetail(ArticleSummary):
    """A single PubMed article fetched by PMID."""

    keywords: list[str] = []
