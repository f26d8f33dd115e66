"""Word storage: inserting words and picking random or saved ones."""

from __future__ import annotations

import logging
import random
import sqlite3
from collections.abc import Iterable, Sequence

from goodmorning.models import COLORS, Word, WordList, Words
from goodmorning.queries import Queries, WordRow, init_schema

log = logging.getLogger(__name__)


def word_exists(words: Iterable[Word], saved_word: str) -> bool:
    """Return True if any of ``words`` has the text ``saved_word``."""
    return any(w.word == saved_word for w in words)


class WordStore:
    """Reads and writes words through a set of queries."""

    def __init__(self, queries: Queries, rng: random.Random | None = None) -> None:
        self.queries = queries
        self.rng = rng if rng is not None else random.Random()

    def _colored(self, rows: Sequence[WordRow]) -> list[Word]:
        start = self.rng.randrange(len(COLORS))
        return [
            Word(row.word, COLORS[(start + i) % len(COLORS)], row.subtext)
            for i, row in enumerate(rows)
        ]

    def insert_words(self, words: Words, category: WordList) -> None:
        """Insert every word under ``category``.

        Every insert is attempted; failures are logged, and the error of the
        last insert, if it failed, is raised.
        """
        error: sqlite3.Error | None = None
        for word in words.words:
            try:
                self.queries.create_word(word.word, str(category), word.subtext)
                error = None
            except sqlite3.Error as exc:
                log.warning("failed to insert word %r: %s", word.word, exc)
                error = exc
        if error is not None:
            raise error

    def random_words(self, count: int, category: WordList) -> Words:
        """Return up to ``count`` random words of ``category``; count is 1 to 3."""
        if not 0 < count < 4:
            raise ValueError("count must be 1, 2, or 3")
        try:
            rows = self.queries.get_random_words(str(category), count)
        except sqlite3.Error as exc:
            log.warning("failed to retrieve random words, count: %d err: %s", count, exc)
            raise
        return Words(self._colored(rows))

    def saved_words(self, saved: str, category: WordList) -> Words:
        """Look up two or three comma-separated words of ``category``.

        Words not found in the store are still returned, without subtext.
        """
        names = saved.split(",")
        try:
            if len(names) == 2:
                rows = self.queries.get_two_saved_words(names[0], names[1], str(category))
            elif len(names) == 3:
                rows = self.queries.get_three_saved_words(
                    names[0], names[1], names[2], str(category)
                )
            else:
                raise ValueError("invalid number of saved words")
        except sqlite3.Error as exc:
            log.warning("failed to retrieve saved words: %s", exc)
            raise

        words = self._colored(rows)
        if len(rows) != len(names):
            for name in names:
                if not word_exists(words, name):
                    words.append(Word(name, self.rng.choice(COLORS)))
        return Words(words)


def open_store(path: str) -> WordStore:
    """Open the SQLite database at ``path``, creating the table if needed."""
    conn = sqlite3.connect(path, check_same_thread=False)
    init_schema(conn)
    return WordStore(Queries(conn))