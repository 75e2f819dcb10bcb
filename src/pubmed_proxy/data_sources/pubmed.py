"""
PubMed E-utilities client.

Three methods:
  1. search            — Find PMIDs matching a query (esearch)
  2. summarize         — Fetch summary records for PMIDs (esummary)
  3. fetch_article_xml — Fetch the full XML record for one PMID (efetch)
"""

from __future__ import annotations

from typing import Any

from pubmed_proxy.constants import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_TIMEOUT,
    PUBMED_FETCH_URL,
    PUBMED_SEARCH_URL,
    PUBMED_SUMMARY_URL,
    SORT_PARAMS,
)
from pubmed_proxy.data_sources.base_client import (
    BaseClient,
    DataSourceError,
    RequestContext,
)


class PubMedClient(BaseClient):
    """Client for querying PubMed/NCBI APIs."""

    def __init__(
        self, api_key: str = "", timeout_seconds: float = DEFAULT_TIMEOUT
    ) -> None:
        super().__init__(timeout_seconds=timeout_seconds)
        self.api_key = api_key

    @property
    def _source_name(self) -> str:
        return "pubmed"

    def _params(self, **params: Any) -> dict[str, Any]:
        params = {"db": "pubmed", **params}
        if self.api_key:
            params["api_key"] = self.api_key
        return params

    def _context(self, method: str, params: dict[str, Any]) -> RequestContext:
        public = {k: v for k, v in params.items() if k != "api_key"}
        return RequestContext(source=self._source_name, method=method, params=public)

    async def search(
        self,
        query: str,
        max_results: int = DEFAULT_MAX_RESULTS,
        sort_by: str = "relevance",
    ) -> list[str]:
        """Search PubMed and return the list of PMIDs in ranked order."""
        params = self._params(
            term=query,
            retmax=max_results,
            sort=SORT_PARAMS.get(sort_by, SORT_PARAMS["relevance"]),
            retmode="json",
        )
        data = await self._rest_get(
            PUBMED_SEARCH_URL, params, context=self._context("search", params)
        )
        return (data or {}).get("esearchresult", {}).get("idlist") or []

    async def summarize(self, pmids: list[str]) -> dict[str, dict[str, Any]]:
        """Fetch esummary records, keyed by PMID.

        The returned mapping also carries esummary's own "uids" entry;
        callers look records up by PMID and never iterate it.
        """
        if not pmids:
            return {}

        params = self._params(id=",".join(pmids), retmode="json")
        data = await self._rest_get(
            PUBMED_SUMMARY_URL, params, context=self._context("summarize", params)
        )
        if not isinstance(data, dict) or "result" not in data:
            error = (data or {}).get("error", "missing 'result'")
            raise DataSourceError(self._source_name, f"Bad esummary response: {error}")
        return data["result"]

    async def fetch_article_xml(self, pmid: str) -> str:
        """Fetch the efetch XML document for a single PMID."""
        params = self._params(id=pmid, retmode="xml")
        return await self._rest_get_xml(
            PUBMED_FETCH_URL, params, context=self._context("fetch_article_xml", params)
        )
