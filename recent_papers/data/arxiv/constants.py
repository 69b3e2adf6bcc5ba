ARXIV_API_URL = "http://export.arxiv.org/api/query"

DEFAULT_MAX_RESULTS = 50
DEFAULT_WINDOW_DAYS = 7

# OR-ed into search_query in this order
ML_CATEGORIES: tuple[str, ...] = (
    "cs.AI",  # Artificial Intelligence
    "cs.LG",  # Machine Learning
    "cs.CV",  # Computer Vision
    "cs.CL",  # Computation and Language (NLP)
    "stat.ML",  # Statistics - Machine Learning
)

KEYWORD_PHRASES: tuple[str, ...] = (
    "deep learning",
    "neural network",
    "machine learning",
)

# Namespace URI -> key prefix used by the feed parser (None means no prefix)
FEED_NAMESPACES: dict[str, str | None] = {
    "http://www.w3.org/2005/Atom": None,
    "http://arxiv.org/schemas/atom": "arxiv",
    "http://a9.com/-/spec/opensearch/1.1/": "opensearch",
}
