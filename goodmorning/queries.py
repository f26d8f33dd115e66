"""SQLite queries over the words table."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

_SCHEMA = """
CREATE TABLE IF NOT EXISTS words (
    id INTEGER PRIMARY KEY,
    word TEXT NOT NULL,
    category TEXT NOT NULL,
    subtext TEXT NOT NULL DEFAULT ''
);
"""

_INSERT_WORD = "INSERT INTO words (word, category, subtext) VALUES (?, ?, ?)"

_RANDOM_WORDS = """
SELECT id, word, category, subtext FROM words
WHERE category = ?
ORDER BY RANDOM()
LIMIT ?
"""

_THREE_SAVED_WORDS = """
SELECT id, word, category, subtext FROM words
WHERE word IN (?, ?, ?) AND category = ?
LIMIT 3
"""

_TWO_SAVED_WORDS = """
SELECT id, word, category, subtext FROM words
WHERE word IN (?, ?) AND category = ?
LIMIT 2
"""


@dataclass(frozen=True)
class WordRow:
    """A row of the words table."""

    id: int
    word: str
    category: str
    subtext: str


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the words table if it does not exist."""
    conn.executescript(_SCHEMA)


class Queries:
    """Typed access to the words table over one connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def _rows(self, sql: str, params: tuple) -> list[WordRow]:
        return [WordRow(*row) for row in self.conn.execute(sql, params)]

    def create_word(self, word: str, category: str, subtext: str) -> WordRow:
        with self.conn:
            cursor = self.conn.execute(_INSERT_WORD, (word, category, subtext))
        return WordRow(cursor.lastrowid, word, category, subtext)

    def get_random_words(self, category: str, limit: int) -> list[WordRow]:
        return self._rows(_RANDOM_WORDS, (category, limit))

    def get_two_saved_words(
        self, word: str, word_2: str, category: str
    ) -> list[WordRow]:
        return self._rows(_TWO_SAVED_WORDS, (word, word_2, category))

    def get_three_saved_words(
        self, word: str, word_2: str, word_3: str, category: str
    ) -> list[WordRow]:
        return self._rows(_THREE_SAVED_WORDS, (word, word_2, word_3, category))