# goodmorning

A small web app that hands out random words to get a writing session
going. Words are kept in a SQLite database and grouped by category:
`fantasy`, `scifi`, `mystery`, `fantasynames` and `fantasypics`.

It needs nothing beyond the Python standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
goodmorning
```

Options:

- `--host` - address to bind (default: all addresses)
- `--port` - port to listen on (default: 8001)
- `--database` - SQLite database file (default: `wordex.db`); it is
  created, with its `words` table, if it does not exist
- `--images` - a text file with one entry per line, each entry being two or
  three words joined by hyphens (default: `images.txt`); the server refuses
  to start if this file cannot be read

The server is the standard library's `wsgiref` server.

## Endpoints

- `GET /` - an HTML page with two or three random words. Pass
  `?words=a,b` or `?words=a,b,c` to show a saved set instead; saved words
  not found in the database are still shown, without subtext.
- `GET /words/` - a fresh set of two or three words. For the
  `fantasypics` category the set is a random line of the images file.
  Send `Content-Type: application/json` to get `{"words": [...]}` back,
  each word with `id`, `word`, `color` and `subtext`; otherwise an HTML
  fragment is returned and the chosen words are put, comma-joined and
  URL-escaped, in a `words` response header. `/words` redirects here.
- `GET /word/<0-2>/` - one new random word. With
  `Content-Type: application/json` the word is returned as JSON; otherwise
  an HTML fragment is returned and the `words` header holds the set from
  `?words=` with that position replaced. `/word/<n>` redirects here.
- `GET /static/...` and `GET /images/...` - files from the `static` and
  `images` directories of the working directory.

Every endpoint accepts `?type=<category>` (case does not matter); an
unknown or missing category falls back to `fantasy`. Failures are answered
with `500 Internal Server Error`.

## Using it as a library

```python
from goodmorning.dataaccess import open_store
from goodmorning.models import Word, Words, WordList

store = open_store("wordex.db")
store.insert_words(Words([Word(word="dragon", subtext="a winged beast")]), WordList.FANTASY)
print(store.random_words(1, WordList.FANTASY).words_hyphenated())
```

- `goodmorning.models` - `WordList`, `parse_word_list`, `Word`, `Words`
  and the `COLORS` palette words are coloured from.
- `goodmorning.queries` - `init_schema` and `Queries`, the SQL over the
  `words` table, returning `WordRow` records.
- `goodmorning.dataaccess` - `WordStore` (`insert_words`, `random_words`
  for 1 to 3 words, `saved_words` for 2 or 3 comma-separated words),
  `open_store` and `word_exists`.
- `goodmorning.server` - `WordsApp`, a plain WSGI application that can be
  mounted in any WSGI server, plus `load_images`, `category_from_query`
  and `main`.

## What it does not do

- No word lists come with the package, and there is no command to load
  them: the database starts empty, and words have to be added with
  `WordStore.insert_words` (or directly in SQLite). Until then the pages
  show no words.
- No images file, stylesheet or images are included; the pages are plain
  HTML markup that refers to `/static/style.css`.