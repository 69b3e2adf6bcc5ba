import urllib.parse

from recent_papers.data.arxiv.constants import (
    ARXIV_API_URL,
    DEFAULT_MAX_RESULTS,
    KEYWORD_PHRASES,
    ML_CATEGORIES,
)


def build_search_query(
    categories: tuple[str, ...] = ML_CATEGORIES,
    phrases: tuple[str, ...] = KEYWORD_PHRASES,
) -> str:
    """
    Build the arXiv boolean search query.

    Categories are OR-ed together, keyword phrases are OR-ed together, and the
    two groups are joined with AND.
    """
    category_terms = " OR ".join(f"cat:{category}" for category in categories)
    phrase_terms = " OR ".join(f'all:"{phrase}"' for phrase in phrases)
    return f"({category_terms}) AND ({phrase_terms})"


def build_query_url(
    max_results: int = DEFAULT_MAX_RESULTS,
    api_url: str = ARXIV_API_URL,
) -> str:
    """Build arXiv API query URL, newest submissions first."""
    params = {
        "search_query": build_search_query(),
        "sortBy": "submittedDate",
        "sortOrder": "descending",
        "max_results": str(max_results),
    }
    return f"{api_url}?{urllib.parse.urlencode(params, quote_via=urllib.parse.quote)}"
