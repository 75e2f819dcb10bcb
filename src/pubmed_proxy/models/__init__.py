"""Data models for pubmed-proxy."""

from pubmed_proxy.models.model_article import ArticleDetail, ArticleSummary
from pubmed_proxy.models.model_api import (
    ArticleResponse,
    ErrorResponse,
    SearchRequest,
    SearchResponse,
)
from pubmed_proxy.models.model_manifest import PluginManifest

__all__ = [
    "ArticleDetail",
    "ArticleSummary",
    "ArticleResponse",
    "ErrorResponse",
    "SearchRequest",
    "SearchResponse",
    "PluginManifest",
]
