"""
Article lookup service.

Glue between the PubMed client and the normalizers: calls upstream,
hands the raw payloads to the normalizers, and returns article records.
"""

import logging

from pubmed_proxy.data_sources.pubmed import PubMedClient
from pubmed_proxy.errors import NotFoundError
from pubmed_proxy.models.model_api import SearchRequest
from pubmed_proxy.models.model_article import ArticleDetail, ArticleSummary
from pubmed_proxy.normalize import normalize_detail, normalize_search
from pubmed_proxy.parsing.xml_tree import parse_xml

logger = logging.getLogger(__name__)


async def search_articles(
    client: PubMedClient, request: SearchRequest
) -> list[ArticleSummary]:
    """Run an esearch + esummary round trip and normalize the results."""
    pmids = await client.search(
        request.query, max_results=request.max_results, sort_by=request.sort_by
    )
    if not pmids:
        logger.debug("No PMIDs for query %r", request.query)
        return []

    logger.debug("Summarizing %d PMIDs for query %r", len(pmids), request.query)
    records = await client.summarize(pmids)
    return normalize_search(pmids, records)


async def get_article(client: PubMedClient, pmid: str) -> ArticleDetail:
    """Fetch one article by PMID and normalize it.

    Raises NotFoundError (with the requested PMID attached) when efetch
    returns no article.
    """
    xml_text = await client.fetch_article_xml(pmid)
    tree = parse_xml(xml_text)
    try:
        return normalize_detail(tree)
    except NotFoundError:
        logger.info("PMID %s not found upstream", pmid)
        raise NotFoundError(pmid)
