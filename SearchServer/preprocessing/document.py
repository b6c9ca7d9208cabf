from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"

    @classmethod
    def from_name(cls, name) -> 'DocumentStatus':
        """
        Resolve a status from an enum member or its name (case-insensitive).

        Raises:
            ValueError: if the name is not a known status
        """
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown document status: {name!r}") from None


@dataclass(frozen=True)
class DocumentData:
    """Metadata kept for every indexed document."""
    rating: int
    status: DocumentStatus


@dataclass
class Document:
    """
    A ranked search result.
    """
    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self):
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )
