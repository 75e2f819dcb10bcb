"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pubmed_proxy import __version__
from pubmed_proxy.api.manifest import build_manifest
from pubmed_proxy.config import Settings, get_settings
from pubmed_proxy.data_sources.pubmed import PubMedClient
from pubmed_proxy.errors import NotFoundError
from pubmed_proxy.models.model_api import (
    ArticleResponse,
    ErrorResponse,
    SearchRequest,
    SearchResponse,
)
from pubmed_proxy.models.model_manifest import PluginManifest
from pubmed_proxy.services.articles import get_article, search_articles

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.state.pubmed_client = PubMedClient(
        api_key=settings.ncbi_api_key,
        timeout_seconds=settings.request_timeout,
    )
    yield
    await app.state.pubmed_client.close()


def get_pubmed_client(request: Request) -> PubMedClient:
    """Shared PubMed client for the running app."""
    return request.app.state.pubmed_client


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


app = FastAPI(
    title="PubMed Proxy API",
    description="Search PubMed articles and fetch article details",
    version=__version__,
    lifespan=lifespan,
    debug=get_settings().debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post(
    "/api/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    body: SearchRequest,
    client: PubMedClient = Depends(get_pubmed_client),
):
    """Search PubMed and return simplified article summaries."""
    if not body.query.strip():
        return _error(400, "search query must not be empty")

    try:
        articles = await search_articles(client, body)
    except Exception as e:
        logger.exception("PubMed search failed for query %r", body.query)
        return _error(500, "error searching PubMed", str(e))

    return SearchResponse(articles=articles)


@app.get(
    "/api/article/{pmid}",
    response_model=ArticleResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def article_detail(
    pmid: str,
    client: PubMedClient = Depends(get_pubmed_client),
):
    """Fetch one PubMed article by PMID."""
    try:
        article = await get_article(client, pmid)
    except NotFoundError:
        return _error(404, "article not found")
    except Exception as e:
        logger.exception("Fetching PubMed article %s failed", pmid)
        return _error(500, "error fetching article details", str(e))

    return ArticleResponse(article=article)


@app.get("/.well-known/ai-plugin.json", response_model=PluginManifest)
async def plugin_manifest(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> PluginManifest:
    """Discovery descriptor for model tooling hosts."""
    base_url = f"{request.url.scheme}://{request.url.netloc}"
    return build_manifest(base_url, settings)
