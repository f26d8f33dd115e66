import sqlite3

import pytest

from goodmorning.queries import Queries, WordRow, init_schema


@pytest.fixture
def queries():
    conn = sqlite3.connect(":memory:")
    init_schema(conn)
    yield Queries(conn)
    conn.close()


def _fill(queries):
    for word in ["dragon", "elf", "wizard", "goblin"]:
        queries.create_word(word, "fantasy", f"{word} sub")
    for word in ["robot", "laser"]:
        queries.create_word(word, "scifi", "")


def test_create_word_returns_row(queries):
    row = queries.create_word("dragon", "fantasy", "breathes fire")
    assert row.word == "dragon"
    assert row.category == "fantasy"
    assert row.subtext == "breathes fire"
    stored = queries.get_random_words("fantasy", 1)
    assert stored == [row]


def test_create_word_ids_increase(queries):
    first = queries.create_word("a", "fantasy", "")
    second = queries.create_word("b", "fantasy", "")
    assert second.id > first.id


def test_init_schema_is_idempotent(queries):
    queries.create_word("dragon", "fantasy", "")
    init_schema(queries.conn)
    assert [r.word for r in queries.get_random_words("fantasy", 3)] == ["dragon"]


def test_random_words_respects_limit_and_category(queries):
    _fill(queries)
    for limit in (1, 2, 3):
        rows = queries.get_random_words("fantasy", limit)
        assert len(rows) == limit
        assert all(r.category == "fantasy" for r in rows)
        assert len({r.word for r in rows}) == limit


def test_random_words_fewer_than_limit(queries):
    _fill(queries)
    rows = queries.get_random_words("scifi", 3)
    assert sorted(r.word for r in rows) == ["laser", "robot"]


def test_random_words_unknown_category(queries):
    _fill(queries)
    assert queries.get_random_words("mystery", 3) == []


def test_two_saved_words(queries):
    _fill(queries)
    rows = queries.get_two_saved_words("elf", "wizard", "fantasy")
    assert sorted(r.word for r in rows) == ["elf", "wizard"]
    assert all(isinstance(r, WordRow) for r in rows)
    assert {r.subtext for r in rows} == {"elf sub", "wizard sub"}


def test_two_saved_words_filters_category(queries):
    _fill(queries)
    rows = queries.get_two_saved_words("elf", "robot", "fantasy")
    assert [r.word for r in rows] == ["elf"]


def test_three_saved_words(queries):
    _fill(queries)
    rows = queries.get_three_saved_words("dragon", "goblin", "missing", "fantasy")
    assert sorted(r.word for r in rows) == ["dragon", "goblin"]


def test_three_saved_words_all_found(queries):
    _fill(queries)
    rows = queries.get_three_saved_words("dragon", "elf", "wizard", "fantasy")
    assert len(rows) == 3
    assert sorted(r.word for r in rows) == ["dragon", "elf", "wizard"]