"""Errors raised by the normalization layer.

Only these two conditions are hard failures. Every other missing field
resolves to a fallback value in the normalizers.
"""


class MissingRecordError(Exception):
    """A searched PMID has no matching esummary record."""

    def __init__(self, pmid: str):
        self.pmid = pmid
        super().__init__(f"No summary record for PMID {pmid}")


class NotFoundError(Exception):
    """An efetch response did not contain a PubmedArticle."""

    def __init__(self, pmid: str | None = None):
        self.pmid = pmid
        message = "Article not found"
        if pmid:
            message = f"Article not found: {pmid}"
        super().__init__(message)
