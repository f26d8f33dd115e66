"""The web application serving random words and its command-line entry."""

from __future__ import annotations

import argparse
import html
import json
import logging
import mimetypes
import random
import re
import sqlite3
from dataclasses import dataclass, field
from http import HTTPStatus
from pathlib import Path
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server

from goodmorning.dataaccess import WordStore, open_store
from goodmorning.models import Word, WordList, Words, parse_word_list

log = logging.getLogger(__name__)

STATIC_ROUTES: tuple[tuple[str, str], ...] = (
    ("/static/", "static"),
    ("/images/", "images"),
)

_WORD_INDEX = re.compile(r"[0-2]")
_INTERNAL_ERROR = "Internal Server Error"


@dataclass
class _Response:
    status: HTTPStatus
    body: bytes = b""
    headers: list[tuple[str, str]] = field(default_factory=list)


def _error(message: str, status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR) -> _Response:
    return _Response(
        status,
        (message + "\n").encode(),
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("X-Content-Type-Options", "nosniff"),
        ],
    )


def _html(body: str, extra: list[tuple[str, str]] | None = None) -> _Response:
    headers = [("Content-Type", "text/html; charset=utf-8"), *(extra or [])]
    return _Response(HTTPStatus.OK, body.encode(), headers)


def _json(data: dict) -> _Response:
    body = json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode()
    return _Response(
        HTTPStatus.OK, body, [("Content-Type", "application/json; charset=utf-8")]
    )


def _redirect(location: str, query: str) -> _Response:
    if query:
        location = f"{location}?{query}"
    return _Response(HTTPStatus.MOVED_PERMANENTLY, b"", [("Location", location)])


def _first(query: str, key: str) -> str:
    return parse_qs(query, keep_blank_values=True).get(key, [""])[0]


def _serve_file(directory: str, relative: str) -> _Response:
    root = Path(directory).resolve()
    target = (root / relative.lstrip("/")).resolve()
    if target.is_dir():
        target = target / "index.html"
    if not target.is_relative_to(root) or not target.is_file():
        return _error("404 page not found", HTTPStatus.NOT_FOUND)
    content_type = mimetypes.guess_type(target.name)[0] or "application/octet-stream"
    return _Response(HTTPStatus.OK, target.read_bytes(), [("Content-Type", content_type)])


def _render_word_div(word: Word, index: str) -> str:
    return (
        f'<div class="word" id="word-{html.escape(index)}" '
        f'style="background-color: {html.escape(word.color)}">'
        f'<span class="text">{html.escape(word.word)}</span>'
        f'<span class="subtext">{html.escape(word.subtext)}</span>'
        "</div>"
    )


def _render_words_div(words: Words) -> str:
    inner = "".join(_render_word_div(w, str(i)) for i, w in enumerate(words.words))
    return f'<div class="words" id="words">{inner}</div>'


def _render_index(words: Words, category: WordList) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        "<title>Good Morning</title>"
        '<link rel="stylesheet" href="/static/style.css">'
        "</head>"
        f'<body data-category="{html.escape(str(category))}" '
        f'data-words="{html.escape(words.words_string())}">'
        f"{_render_words_div(words)}"
        "</body></html>"
    )


def load_images(text: str) -> list[str]:
    """Split the image list into lines, accepting CRLF line ends."""
    return text.replace("\r\n", "\n").split("\n")


def category_from_query(query: str) -> WordList:
    """The category named by the ``type`` query parameter, fantasy by default."""
    try:
        return parse_word_list(_first(query, "type"))
    except ValueError:
        log.info("defaulting to fantasy")
        return WordList.FANTASY


class WordsApp:
    """WSGI application serving pages and fragments of random words."""

    def __init__(
        self,
        store: WordStore,
        images: list[str],
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.images = list(images)
        self.rng = rng if rng is not None else random.Random()

    def __call__(self, environ, start_response):
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO", "") or "/"
        query = environ.get("QUERY_STRING", "")
        content_type = environ.get("CONTENT_TYPE", "")
        response = self._route(method, path, query, content_type)
        headers = [*response.headers, ("Content-Length", str(len(response.body)))]
        start_response(f"{response.status.value} {response.status.phrase}", headers)
        return [b"" if method == "HEAD" else response.body]

    def _route(self, method: str, path: str, query: str, content_type: str) -> _Response:
        if method in ("GET", "HEAD"):
            for prefix, directory in STATIC_ROUTES:
                if path.startswith(prefix):
                    return _serve_file(directory, path[len(prefix):])
        if path == "/words":
            return _redirect("/words/", query)
        if path.startswith("/words/"):
            return self._words(query, content_type)
        parts = path.split("/")
        if len(parts) >= 3 and parts[1] == "word" and parts[2]:
            if len(parts) == 3:
                return _redirect(path + "/", query)
            return self._word(parts[2], query, content_type)
        return self._index(query)

    def _random_count(self) -> int:
        return 2 + self.rng.randrange(2)

    def _index(self, query: str) -> _Response:
        saved = _first(query, "words")
        category = category_from_query(query)
        try:
            if saved:
                words = self.store.saved_words(saved, category)
            else:
                words = self.store.random_words(self._random_count(), category)
        except (ValueError, sqlite3.Error):
            return _error(_INTERNAL_ERROR)
        return _html(_render_index(words, category))

    def _words(self, query: str, content_type: str) -> _Response:
        category = category_from_query(query)
        try:
            if category is WordList.FANTASYPICS:
                if not self.images:
                    raise ValueError("no images")
                saved = self.rng.choice(self.images).replace("-", ",")
                words = self.store.saved_words(saved, category)
            else:
                words = self.store.random_words(self._random_count(), category)
        except (ValueError, sqlite3.Error):
            return _error(_INTERNAL_ERROR)

        if content_type == "application/json":
            for i, word in enumerate(words.words):
                word.id = i
            return _json(words.to_dict())

        return _html(_render_words_div(words), [("words", words.words_string())])

    def _word(self, segment: str, query: str, content_type: str) -> _Response:
        if not _WORD_INDEX.fullmatch(segment):
            return _error("Failed to retrieve word index")
        idx = int(segment)
        saved = _first(query, "words").split(",")
        category = category_from_query(query)
        try:
            word = self.store.random_words(1, category).words[0]
        except (ValueError, sqlite3.Error, IndexError):
            return _error(_INTERNAL_ERROR)

        if content_type == "application/json":
            return _json(word.to_dict())

        if saved[0] == "":
            saved = ["", "", ""]
        if idx >= len(saved):
            return _error(_INTERNAL_ERROR)

        new_words = Words(
            [word if i == idx else Word(text) for i, text in enumerate(saved)]
        )
        return _html(_render_word_div(word, segment), [("words", new_words.words_string())])


def main(argv: list[str] | None = None) -> int:
    """Run the word server."""
    parser = argparse.ArgumentParser(prog="goodmorning", description="Serve random words.")
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument("--port", type=int, default=8001, help="port to listen on")
    parser.add_argument("--database", default="wordex.db", help="SQLite database file")
    parser.add_argument("--images", default="images.txt", help="file listing image word pairs")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        images = load_images(Path(args.images).read_text(encoding="utf-8"))
    except OSError as exc:
        parser.error(f"cannot read images file: {exc}")
    store = open_store(args.database)

    app = WordsApp(store, images)
    log.info("Starting server at http://localhost:%d", args.port)
    with make_server(args.host, args.port, app) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0