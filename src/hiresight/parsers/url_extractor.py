"""Fetch a job posting URL and reduce it to clean article text.

Pipeline:
  1. fetch the raw HTML (through the CORS relay by default)
  2. strip page chrome and let readability pick the main content block
  3. normalize whitespace
  4. drop short lines and boilerplate (apply/share/privacy/cookies/login,
     copyright, back navigation; English and Portuguese)

Output is best effort: unusual boilerplate may leak through. A page that
yields no text after cleaning raises ExtractionError.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

import httpx
from bs4 import BeautifulSoup, NavigableString, Tag
from readability import Document
from readability.readability import Unparseable

from hiresight.config import DEFAULT_RELAY_URL
from hiresight.errors import ExtractionError, FetchError
from hiresight.utils.url_validator import check_scheme, validate_url

logger = logging.getLogger(__name__)

BOILERPLATE_PHRASES = (
    "share this job",
    "apply now",
    "report this job",
    "similar jobs",
    "privacy policy",
    "terms of service",
    "cookie settings",
    "all rights reserved",
    "back to top",
    "view all jobs",
    "powered by",
    "log in",
    "sign up",
    "política de privacidade",
    "todos os direitos reservados",
)

BOILERPLATE_PATTERNS = (
    r"©\s*\d{4}",
    r"^voltar$",
    r"^compartilhar vaga$",
    r"^candidate-se$",
)

BOILERPLATE_RE = re.compile(
    "|".join([re.escape(p) for p in BOILERPLATE_PHRASES] + list(BOILERPLATE_PATTERNS)),
    re.IGNORECASE,
)

_STRIP_TAGS = (
    "script", "style", "noscript", "iframe", "svg", "canvas", "template",
    "form", "button", "input", "select", "nav", "header", "footer", "aside",
)
_BLOCK_TAGS = (
    "p", "div", "section", "article", "main", "li", "ul", "ol", "dl", "dt", "dd",
    "h1", "h2", "h3", "h4", "h5", "h6", "tr", "table", "pre", "blockquote",
)


class URLContentExtractor:
    """Fetches a page (optionally through a CORS relay) and returns its article text."""

    def __init__(
        self,
        relay_url: str = DEFAULT_RELAY_URL,
        *,
        timeout: float = 30.0,
        min_line_length: int = 5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.relay_url = relay_url
        self.timeout = timeout
        self.min_line_length = min_line_length
        self._transport = transport

    async def extract(self, url: str) -> str:
        """Fetch ``url`` and return its cleaned main text."""
        html = await self.fetch_html(url)
        article = extract_main_text(html)
        text = clean_article_text(article, min_line_length=self.min_line_length)
        if not text:
            raise ExtractionError(f"No job text left on {url} after removing boilerplate")
        logger.info("Extracted %d chars (%d lines) from %s", len(text), text.count("\n") + 1, url)
        return text

    async def fetch_html(self, url: str) -> str:
        url = check_scheme(url)
        if not self.relay_url:
            validate_url(url)

        kwargs: dict = {"timeout": self.timeout, "follow_redirects": True}
        if self._transport is not None:
            kwargs["transport"] = self._transport

        async with httpx.AsyncClient(**kwargs) as client:
            if self.relay_url:
                return await self._fetch_via_relay(client, url)
            return await self._fetch_direct(client, url)

    async def _fetch_via_relay(self, client: httpx.AsyncClient, url: str) -> str:
        relay_target = f"{self.relay_url}{quote(url, safe='')}"
        response = await self._get(client, relay_target)
        try:
            data = response.json()
        except ValueError as exc:
            raise FetchError(f"Relay returned a non-JSON body for {url}") from exc
        contents = data.get("contents") if isinstance(data, dict) else None
        if not contents:
            raise FetchError(f"Could not retrieve content from {url}")
        return contents

    async def _fetch_direct(self, client: httpx.AsyncClient, url: str) -> str:
        response = await self._get(client, url)
        if not response.text:
            raise FetchError(f"Could not retrieve content from {url}")
        return response.text

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"Failed to fetch from URL with status: {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch from URL: {exc}") from exc
        return response


# ---------------------------------------------------------------------------
# Main content detection
# ---------------------------------------------------------------------------


def extract_main_text(html: str) -> str:
    """Return the text of the main content block in ``html``.

    Page chrome is stripped first, then readability picks the article and
    its summary is flattened to one line per block.
    """
    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(_STRIP_TAGS):
        tag.decompose()
    if not soup.get_text(strip=True):
        raise ExtractionError("Could not extract main content from the page")

    try:
        summary = Document(str(soup)).summary(html_partial=True)
    except Unparseable as exc:
        raise ExtractionError(f"Could not extract main content from the page: {exc}") from exc

    text = _block_text(BeautifulSoup(summary, "lxml"))
    if not text.strip():
        raise ExtractionError("Could not extract main content from the page")
    return text


def _block_text(node: Tag) -> str:
    """Text of ``node`` with line breaks at block boundaries."""
    for br in node.find_all("br"):
        br.replace_with(NavigableString("\n"))
    for block in node.find_all(_BLOCK_TAGS):
        block.insert_before(NavigableString("\n"))
        block.insert_after(NavigableString("\n"))
    return node.get_text()


# ---------------------------------------------------------------------------
# Text cleanup
# ---------------------------------------------------------------------------


def normalize_whitespace(text: str) -> str:
    """Tabs to spaces, collapse space runs, cap newline runs at two."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", " ").replace("\u00a0", " ")
    text = re.sub(r" +", " ", text)
    return re.sub(r"\n{3,}", "\n\n", text)


def is_boilerplate(line: str) -> bool:
    return bool(BOILERPLATE_RE.search(line))


def clean_article_text(text: str, *, min_line_length: int = 5) -> str:
    """Normalize whitespace, then keep only substantive, non-boilerplate lines."""
    kept = []
    for line in normalize_whitespace(text).split("\n"):
        stripped = line.strip()
        if len(stripped) < min_line_length or is_boilerplate(stripped):
            continue
        kept.append(stripped)
    return "\n".join(kept).strip()
