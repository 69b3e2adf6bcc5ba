from datetime import UTC, datetime, timedelta

import pytest

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

FEED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <link href="http://arxiv.org/api/query?search_query=cat:cs.LG" rel="self" type="application/atom+xml"/>
  <title type="html">ArXiv Query: search_query=cat:cs.LG</title>
  <id>http://arxiv.org/api/query-id</id>
  <updated>2026-10-19T00:00:00-04:00</updated>
  <opensearch:totalResults xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">{total}</opensearch:totalResults>
  <opensearch:startIndex xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:startIndex>
  {entries}
</feed>
"""


def format_timestamp(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def build_entry(
    arxiv_id: str = "2610.01234v1",
    published: datetime | None = None,
    title: str = "Sparse Attention\n    for Long Contexts",
    authors: tuple[str, ...] = ("Ada Lovelace", "Alan Turing"),
    categories: tuple[str, ...] = ("cs.LG", "cs.AI"),
    with_links: bool = True,
    comment: str | None = "12 pages, 4 figures",
) -> str:
    published_at = published or NOW - timedelta(days=1)
    author_xml = "".join(f"<author><name>{name}</name></author>" for name in authors)
    category_xml = "".join(
        f'<category term="{term}" scheme="http://arxiv.org/schemas/atom"/>' for term in categories
    )
    primary_xml = (
        f'<arxiv:primary_category xmlns:arxiv="http://arxiv.org/schemas/atom" '
        f'term="{categories[0]}" scheme="http://arxiv.org/schemas/atom"/>'
        if categories
        else ""
    )
    comment_xml = (
        f'<arxiv:comment xmlns:arxiv="http://arxiv.org/schemas/atom">{comment}</arxiv:comment>'
        if comment is not None
        else ""
    )
    link_xml = (
        f'<link href="http://arxiv.org/abs/{arxiv_id}" rel="alternate" type="text/html"/>'
        f'<link title="pdf" href="http://arxiv.org/pdf/{arxiv_id}" rel="related" type="application/pdf"/>'
        if with_links
        else ""
    )
    return f"""
  <entry>
    <id>http://arxiv.org/abs/{arxiv_id}</id>
    <updated>{format_timestamp(published_at)}</updated>
    <published>{format_timestamp(published_at)}</published>
    <title>{title}</title>
    <summary>  We study attention.
  It scales.
    </summary>
    {author_xml}
    {comment_xml}
    {link_xml}
    {primary_xml}
    {category_xml}
  </entry>"""


def build_feed(*entries: str, total: int | None = None) -> str:
    return FEED_TEMPLATE.format(
        total=len(entries) if total is None else total,
        entries="".join(entries),
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def iso():
    return format_timestamp


@pytest.fixture
def make_entry():
    return build_entry


@pytest.fixture
def make_feed():
    return build_feed
