from datetime import datetime

import httpx

from recent_papers.common.logging import get_logger
from recent_papers.common.settings import ArxivSettings, get_settings
from recent_papers.data.arxiv.client import ArxivFeedClient
from recent_papers.data.arxiv.constants import DEFAULT_MAX_RESULTS
from recent_papers.data.arxiv.parser import normalize_entries, parse_feed
from recent_papers.data.arxiv.query import build_query_url
from recent_papers.data.arxiv.schemas import NormalizedPaper
from recent_papers.data.arxiv.window import filter_since, window_cutoff

logger = get_logger(__name__)


async def get_recent_papers(
    max_results: int = DEFAULT_MAX_RESULTS,
    *,
    client: httpx.AsyncClient | None = None,
    now: datetime | None = None,
    settings: ArxivSettings | None = None,
) -> list[NormalizedPaper]:
    """
    Fetch the newest ML papers from arXiv published within the trailing window.

    Args:
        max_results: Number of entries requested from arXiv, passed through as-is.
        client: Optional HTTP client, e.g. one with a retrying transport.
        now: Reference time for the window; defaults to the current UTC time.
        settings: arXiv settings; defaults to the application settings.

    Returns:
        Normalized papers in upstream order (newest first).

    Raises:
        FetchError: If the HTTP request fails or returns a non-success status.
        FeedParseError: If the response is not a parseable Atom feed.
    """
    settings = settings or get_settings().arxiv
    cutoff = window_cutoff(now, settings.window_days)

    url = build_query_url(max_results, api_url=settings.api_url)
    logger.info("arXiv query: %s", url)

    xml_text = await ArxivFeedClient(settings, client=client).fetch(url)
    entries = parse_feed(xml_text)

    recent = filter_since(entries, cutoff)
    papers = normalize_entries(recent)

    logger.info(
        "Fetched %d entries, kept %d published since %s",
        len(entries),
        len(papers),
        cutoff.isoformat(),
    )
    return papers
