from recent_papers.data.arxiv.errors import ArxivError, FeedParseError, FetchError
from recent_papers.data.arxiv.schemas import NormalizedPaper
from recent_papers.data.arxiv.service import get_recent_papers

__all__ = [
    # Errors
    "ArxivError",
    "FeedParseError",
    "FetchError",
    # Schemas
    "NormalizedPaper",
    # Service
    "get_recent_papers",
]
