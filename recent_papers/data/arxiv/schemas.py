from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class NormalizedPaper:
    """Paper record normalized from an arXiv Atom entry.

    Every field is always populated; data missing upstream becomes an empty
    string or an empty list.
    """

    id: str = ""
    title: str = ""
    authors: list[str] = field(default_factory=list)
    summary: str = ""
    published: str = ""
    updated: str = ""
    link: str = ""
    pdf_link: str = ""
    comment: str = ""
    categories: list[str] = field(default_factory=list)
    primary_category: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "authors": list(self.authors),
            "summary": self.summary,
            "published": self.published,
            "updated": self.updated,
            "link": self.link,
            "pdfLink": self.pdf_link,
            "comment": self.comment,
            "categories": list(self.categories),
            "primaryCategory": self.primary_category,
        }
