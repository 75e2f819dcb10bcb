"""Command-line interface for pubmed-proxy."""

import asyncio
import json

import click
import uvicorn

from pubmed_proxy.config import get_settings
from pubmed_proxy.constants import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT
from pubmed_proxy.data_sources.base_client import DataSourceError
from pubmed_proxy.data_sources.pubmed import PubMedClient
from pubmed_proxy.errors import MissingRecordError, NotFoundError
from pubmed_proxy.logging_config import configure_logging
from pubmed_proxy.models.model_api import SearchRequest
from pubmed_proxy.services.articles import get_article, search_articles


def _client() -> PubMedClient:
    settings = get_settings()
    return PubMedClient(
        api_key=settings.ncbi_api_key, timeout_seconds=settings.request_timeout
    )


@click.group()
@click.version_option(package_name="pubmed-proxy")
@click.option("--log-level", default=None, help="Override LOG_LEVEL from settings")
def main(log_level: str | None):
    """pubmed-proxy: search PubMed and fetch simplified article records."""
    configure_logging(log_level or get_settings().log_level)


@main.command()
@click.option("--host", default=None, help="Bind address (default: settings.host)")
@click.option("--port", type=int, default=None, help="Port (default: settings.port)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool):
    """Run the HTTP API."""
    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    click.echo(f"Server running on {host}:{port}")
    uvicorn.run(
        "pubmed_proxy.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@main.command()
@click.argument("query")
@click.option(
    "-n",
    "--max-results",
    type=click.IntRange(1, MAX_RESULTS_LIMIT),
    default=DEFAULT_MAX_RESULTS,
    show_default=True,
    help="Number of articles to return",
)
@click.option(
    "-s",
    "--sort-by",
    type=click.Choice(["relevance", "date"]),
    default="relevance",
    show_default=True,
)
def search(query: str, max_results: int, sort_by: str):
    """Search PubMed and print article summaries as JSON."""
    request = SearchRequest(query=query, max_results=max_results, sort_by=sort_by)

    async def run():
        async with _client() as client:
            return await search_articles(client, request)

    try:
        articles = asyncio.run(run())
    except (DataSourceError, MissingRecordError) as e:
        raise click.ClickException(str(e))

    click.echo(
        json.dumps([a.model_dump(by_alias=True) for a in articles], indent=2)
    )


@main.command()
@click.argument("pmid")
def article(pmid: str):
    """Fetch one article by PMID and print it as JSON."""

    async def run():
        async with _client() as client:
            return await get_article(client, pmid)

    try:
        detail = asyncio.run(run())
    except (NotFoundError, DataSourceError) as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(detail.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    main()
