"""Word categories and the word records shown to clients."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from urllib.parse import quote_plus

COLORS: tuple[str, ...] = (
    "#FFB6C1",  # LightPink
    "#ADD8E6",  # LightBlue
    "#90EE90",  # LightGreen
    "#FFD700",  # Gold
    "#FFA07A",  # LightSalmon
    "#E6E6FA",  # Lavender
    "#F0E68C",  # Khaki
    "#D8BFD8",  # Thistle
)


class WordList(Enum):
    """A category of words."""

    FANTASY = "fantasy"
    SCIFI = "scifi"
    MYSTERY = "mystery"
    FANTASYNAMES = "fantasynames"
    FANTASYPICS = "fantasypics"

    def __str__(self) -> str:
        return self.value


def parse_word_list(text: str) -> WordList:
    """Return the category named by ``text``, ignoring case.

    Raises ValueError for an unknown name.
    """
    try:
        return WordList(text.lower())
    except ValueError:
        raise ValueError(f"invalid word list: {text}") from None


@dataclass
class Word:
    """A single word with its display colour and subtext."""

    word: str
    color: str = ""
    subtext: str = ""
    id: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "word": self.word,
            "color": self.color,
            "subtext": self.subtext,
        }


@dataclass
class Words:
    """An ordered collection of words."""

    words: list[Word] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"words": [w.to_dict() for w in self.words]}

    def words_string(self) -> str:
        """The words joined by commas, escaped for a URL query."""
        return quote_plus(",".join(w.word for w in self.words), safe="")

    def words_hyphenated(self) -> str:
        """The words sorted and joined by hyphens."""
        return "-".join(sorted(w.word for w in self.words))


__all__ = ["COLORS", "WordList", "Word", "Words", "parse_word_list", "asdict"]