"""Atom feed parsing and entry normalization.

The feed is parsed into plain dicts with ``xmltodict``: attributes are keyed
with an ``@`` prefix, and element text sits under ``#text`` whenever the
element also carries attributes. Repeated elements become lists, but a lone
element stays a single dict, so every repeatable field goes through
:func:`as_list` before use.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from recent_papers.common.logging import get_logger
from recent_papers.data.arxiv.constants import FEED_NAMESPACES
from recent_papers.data.arxiv.errors import FeedParseError
from recent_papers.data.arxiv.schemas import NormalizedPaper

logger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

RawEntry = Mapping[str, Any]


def as_list(value: Any) -> list[Any]:
    """Coerce a field that may be absent, a single item, or a list into a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def text_of(value: Any) -> str:
    """Return the text content of a parsed element."""
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return text_of(value.get("#text"))
    return str(value)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def parse_feed(text: str | bytes) -> list[RawEntry]:
    """
    Parse Atom feed markup into raw entry mappings.

    Args:
        text: Response body returned by the arXiv API.

    Returns:
        Entries in feed order; empty when the feed has no entries.

    Raises:
        FeedParseError: If the markup is malformed or has no feed root.
    """
    try:
        document = xmltodict.parse(
            text,
            process_namespaces=True,
            namespaces=FEED_NAMESPACES,
        )
    except ExpatError as e:
        logger.error("Malformed arXiv feed: %s", e)
        raise FeedParseError(f"Malformed feed markup: {e}") from e

    if "feed" not in document:
        raise FeedParseError(f"Expected <feed> root, got <{next(iter(document), '')}>")

    feed = document["feed"]
    if not isinstance(feed, Mapping):
        return []

    total = text_of(feed.get("opensearch:totalResults"))
    if total:
        logger.debug("Upstream reports %s total results", total)

    return [_as_mapping(entry) for entry in as_list(feed.get("entry"))]


def normalize_entry(entry: RawEntry) -> NormalizedPaper:
    """Map one raw Atom entry to a NormalizedPaper."""
    link, pdf_link = _select_links(entry)

    return NormalizedPaper(
        id=text_of(entry.get("id")),
        title=collapse_whitespace(text_of(entry.get("title"))),
        authors=[
            text_of(_as_mapping(author).get("name")) for author in as_list(entry.get("author"))
        ],
        summary=collapse_whitespace(text_of(entry.get("summary"))),
        published=text_of(entry.get("published")),
        updated=text_of(entry.get("updated")),
        link=link,
        pdf_link=pdf_link,
        comment=text_of(entry.get("arxiv:comment")),
        categories=[
            text_of(_as_mapping(category).get("@term"))
            for category in as_list(entry.get("category"))
        ],
        primary_category=text_of(_as_mapping(entry.get("arxiv:primary_category")).get("@term")),
    )


def normalize_entries(entries: Iterable[RawEntry]) -> list[NormalizedPaper]:
    return [normalize_entry(entry) for entry in entries]


def _select_links(entry: RawEntry) -> tuple[str, str]:
    """Return (main link, pdf link) hrefs."""
    links = [_as_mapping(link) for link in as_list(entry.get("link"))]

    # A lone link is the main link whatever its rel
    if len(links) == 1:
        return text_of(links[0].get("@href")), ""

    return _find_href(links, "@rel", "alternate"), _find_href(links, "@title", "pdf")


def _find_href(links: list[Mapping[str, Any]], attr: str, value: str) -> str:
    for link in links:
        if text_of(link.get(attr)) == value:
            return text_of(link.get("@href"))
    return ""


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}
