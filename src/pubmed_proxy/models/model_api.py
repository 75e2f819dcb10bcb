"""Request and response bodies for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pubmed_proxy.constants import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT
from pubmed_proxy.models.model_article import ArticleDetail, ArticleSummary


class SearchRequest(BaseModel):
    """Body of POST /api/search."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = ""
    max_results: int = Field(
        default=DEFAULT_MAX_RESULTS,
        alias="maxResults",
        ge=1,
        le=MAX_RESULTS_LIMIT,
    )
    sort_by: Literal["relevance", "date"] = Field(
        default="relevance", alias="sortBy"
    )

    @field_validator("sort_by", mode="before")
    @classmethod
    def default_unknown_sort(cls, value: object) -> object:
        # Anything other than "date" searches by relevance
        if value != "date":
            return "relevance"
        return value


class SearchResponse(BaseModel):
    articles: list[ArticleSummary]


class ArticleResponse(BaseModel):
    article: ArticleDetail


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
