"""Project-wide constants."""

# -- PubMed / NCBI ----------------------------------------------------------
NCBI_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
PUBMED_SEARCH_URL: str = f"{NCBI_BASE_URL}/esearch.fcgi"
PUBMED_SUMMARY_URL: str = f"{NCBI_BASE_URL}/esummary.fcgi"
PUBMED_FETCH_URL: str = f"{NCBI_BASE_URL}/efetch.fcgi"
PUBMED_ARTICLE_URL: str = "https://pubmed.ncbi.nlm.nih.gov/{pmid}/"

# -- Search defaults --------------------------------------------------------
DEFAULT_MAX_RESULTS: int = 10
MAX_RESULTS_LIMIT: int = 100
DEFAULT_TIMEOUT: float = 30.0

# sortBy value -> esearch `sort` parameter
SORT_PARAMS: dict[str, str] = {
    "relevance": "relevance",
    "date": "pub+date",
}

# -- Normalization fallbacks ------------------------------------------------
UNKNOWN_AUTHOR: str = "unknown author"
UNKNOWN_JOURNAL: str = "unknown journal"
UNKNOWN_DATE: str = "unknown date"
NO_ABSTRACT: str = "no abstract"
UNTITLED: str = "untitled"
DOI_PREFIX: str = "doi: "

# -- Parsed XML tree keys ---------------------------------------------------
TEXT_KEY: str = "_"
ATTR_KEY: str = "$"

# -- Plugin manifest --------------------------------------------------------
PLUGIN_NAME_FOR_HUMAN: str = "PubMed Search"
PLUGIN_NAME_FOR_MODEL: str = "pubmed_search"
PLUGIN_DESCRIPTION_FOR_HUMAN: str = (
    "Search medical and biomedical articles on PubMed"
)
PLUGIN_DESCRIPTION_FOR_MODEL: str = (
    "Search the PubMed database for medical and biomedical articles and "
    "retrieve article summaries and details"
)
