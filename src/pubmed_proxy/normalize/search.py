"""Normalize esearch/esummary results into ArticleSummary records."""

from typing import Any, Mapping, Sequence

from pubmed_proxy.constants import (
    DOI_PREFIX,
    NO_ABSTRACT,
    UNKNOWN_AUTHOR,
    UNKNOWN_DATE,
    UNKNOWN_JOURNAL,
)
from pubmed_proxy.errors import MissingRecordError
from pubmed_proxy.models.model_article import ArticleSummary


def normalize_search(
    ids: Sequence[str] | None,
    records_by_id: Mapping[str, dict[str, Any]],
) -> list[ArticleSummary]:
    """Build one ArticleSummary per PMID, in the order of `ids`.

    Raises MissingRecordError if any PMID has no record; there is no
    partial result.
    """
    if not ids:
        return []

    articles = []
    for pmid in ids:
        if pmid not in records_by_id:
            raise MissingRecordError(pmid)
        articles.append(_summarize(pmid, records_by_id[pmid]))
    return articles


def _summarize(pmid: str, record: dict[str, Any]) -> ArticleSummary:
    return ArticleSummary(
        id=pmid,
        title=record.get("title") or "",
        authors=_authors(record),
        journal=(
            record.get("fulljournalname") or record.get("source") or UNKNOWN_JOURNAL
        ),
        pub_date=record.get("pubdate") or UNKNOWN_DATE,
        abstract=record.get("abstract") or NO_ABSTRACT,
        doi=_doi(record),
    )


def _authors(record: dict[str, Any]) -> str:
    authors = record.get("authors")
    if authors is None:
        return UNKNOWN_AUTHOR
    return ", ".join(author.get("name", "") for author in authors)


def _doi(record: dict[str, Any]) -> str | None:
    elocation = record.get("elocationid")
    if not elocation:
        return None
    # Exact, case-sensitive prefix; other forms pass through untouched
    return elocation.removeprefix(DOI_PREFIX)
