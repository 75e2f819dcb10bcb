"""Normalization of raw PubMed payloads into article records."""

from pubmed_proxy.normalize.detail import normalize_detail
from pubmed_proxy.normalize.search import normalize_search

__all__ = ["normalize_detail", "normalize_search"]
