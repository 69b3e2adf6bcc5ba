from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any, TypeVar

from recent_papers.data.arxiv.constants import DEFAULT_WINDOW_DAYS
from recent_papers.data.arxiv.parser import text_of

T = TypeVar("T")


def parse_timestamp(value: str) -> datetime | None:
    """Parse ISO datetime string to UTC datetime, None if unparseable."""
    if not value:
        return None

    try:
        if value.endswith("Z"):
            dt = datetime.fromisoformat(value[:-1]).replace(tzinfo=UTC)
        else:
            dt = datetime.fromisoformat(value)
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def window_cutoff(now: datetime | None = None, days: int = DEFAULT_WINDOW_DAYS) -> datetime:
    """Earliest publication time still inside the trailing window."""
    current = now or datetime.now(UTC)
    if current.tzinfo is None:
        current = current.replace(tzinfo=UTC)
    return current - timedelta(days=days)


def filter_recent(
    items: Iterable[T],
    now: datetime | None = None,
    days: int = DEFAULT_WINDOW_DAYS,
) -> list[T]:
    """
    Keep items published within the trailing window.

    Accepts raw entry mappings or NormalizedPaper records. The lower bound is
    inclusive and there is no upper bound, so timestamps slightly in the future
    are kept. Items without a parseable ``published`` value are dropped.
    """
    return filter_since(items, window_cutoff(now, days))


def filter_since(items: Iterable[T], cutoff: datetime) -> list[T]:
    """Keep items published at or after cutoff, preserving order."""
    kept: list[T] = []

    for item in items:
        published = parse_timestamp(_published_of(item))
        if published is not None and published >= cutoff:
            kept.append(item)

    return kept


def _published_of(item: Any) -> str:
    if isinstance(item, Mapping):
        return text_of(item.get("published"))
    return getattr(item, "published", "") or ""
