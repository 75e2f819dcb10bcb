"""
Normalize a parsed efetch tree into an ArticleDetail.

The tree mirrors the efetch XML: repeated elements are lists, single
elements are scalars, attributes sit under ATTR_KEY and text under TEXT_KEY
(see pubmed_proxy.parsing.xml_tree).
"""

from typing import Any

from pubmed_proxy.constants import (
    NO_ABSTRACT,
    UNKNOWN_AUTHOR,
    UNKNOWN_DATE,
    UNKNOWN_JOURNAL,
    UNTITLED,
)
from pubmed_proxy.errors import NotFoundError
from pubmed_proxy.models.model_article import ArticleDetail
from pubmed_proxy.normalize.shapes import attr_of, dig, text_of, to_list


def normalize_detail(tree: dict[str, Any]) -> ArticleDetail:
    """Build the ArticleDetail for the first PubmedArticle in `tree`.

    Raises NotFoundError when the tree holds no PubmedArticle. Every other
    missing field falls back to a default value.
    """
    articles = to_list(dig(tree, "PubmedArticleSet", "PubmedArticle"))
    if not articles or not isinstance(articles[0], dict):
        raise NotFoundError()
    pubmed_article = articles[0]

    citation = pubmed_article.get("MedlineCitation") or {}
    article = citation.get("Article") or {}
    pmid = text_of(citation.get("PMID")) or ""

    return ArticleDetail(
        id=pmid,
        title=text_of(article.get("ArticleTitle")) or UNTITLED,
        authors=_authors(article),
        journal=text_of(dig(article, "Journal", "Title")) or UNKNOWN_JOURNAL,
        pub_date=_pub_date(article),
        abstract=_abstract(article),
        doi=_doi(pubmed_article),
        keywords=_keywords(citation),
    )


def _abstract(article: dict[str, Any]) -> str:
    # <AbstractText/> carries no text and counts as absent
    sections = [
        section
        for section in to_list(dig(article, "Abstract", "AbstractText"))
        if text_of(section)
    ]
    if not sections:
        return NO_ABSTRACT

    parts = []
    for section in sections:
        text = text_of(section)
        label = attr_of(section, "Label")
        parts.append(f"{label}: {text}" if label else text)
    return "\n".join(parts)


def _author_name(author: Any) -> str:
    if not isinstance(author, dict):
        return ""
    last_name = text_of(author.get("LastName")) or ""
    fore_name = text_of(author.get("ForeName")) or ""
    separator = " " if last_name and fore_name else ""
    return f"{last_name}{separator}{fore_name}"


def _authors(article: dict[str, Any]) -> str:
    # No list at all is "unknown"; an empty list joins to ""
    authors = dig(article, "AuthorList", "Author")
    if authors is None:
        return UNKNOWN_AUTHOR
    return ", ".join(_author_name(author) for author in to_list(authors))


def _pub_date(article: dict[str, Any]) -> str:
    pub_date = dig(article, "Journal", "JournalIssue", "PubDate") or {}
    return (
        text_of(dig(pub_date, "Year"))
        or text_of(dig(pub_date, "MedlineDate"))
        or UNKNOWN_DATE
    )


def _doi(pubmed_article: dict[str, Any]) -> str | None:
    article_ids = dig(pubmed_article, "PubmedData", "ArticleIdList", "ArticleId")
    for article_id in to_list(article_ids):
        if attr_of(article_id, "IdType") == "doi":
            return text_of(article_id)
    return None


def _keywords(citation: dict[str, Any]) -> list[str]:
    # Citations may carry one KeywordList per owner (NLM, NOTNLM, ...)
    keywords = []
    for keyword_list in to_list(citation.get("KeywordList")):
        for keyword in to_list(dig(keyword_list, "Keyword")):
            keywords.append(text_of(keyword) or "")
    return keywords
