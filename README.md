# einsteinpuzzle

This package covers the data side of a logic puzzle game. It has a small
text table format used for configuration, settings storage built on that
format, a top-ten list of solving times, a tokenizer that splits text into
words and paragraph breaks, and helpers for the game's binary save format.

## Install

    pip install .

## Tables

A table is written as `name = value;` pairs, or as array elements separated
by commas. Nested tables go in braces. Values can be integers, floats,
strings (quoted, or bare identifiers) and tables.

```python
from einsteinpuzzle.table import Table, ValueType

table = Table.parse('width = 800; title = "Puzzle"; colors = { red, green }')
table.get_int("width", 0)                   # 800
table.get_string("title", "")               # 'Puzzle'
table.get_type("colors")                    # ValueType.TABLE
table.get_table("colors", None).is_array()  # True

table.set_int("height", 600)
table.save("settings.cfg")
again = Table.load("settings.cfg")
```

Other parts of the table API:

- Iterating over a table yields `(key, value)` pairs in key order.
- `len(table)` gives the number of fields, and `key in table` or
  `has_key(key)` tests whether a field exists.
- `get_double` reads a field as a float.
- `copy()` makes a deep copy.
- `to_string(print_braces, beautify, spaces)` and `str(table)` render the
  table as text.

Files are read and written as UTF-8. `TableError` is raised in these cases:

- the text cannot be parsed;
- a field cannot be converted to the type asked for;
- `get_type` is called for a field that does not exist;
- a file cannot be read or written.

## Settings storage and top scores

```python
from einsteinpuzzle.tablestorage import TableStorage
from einsteinpuzzle.topscores import TopScores

with TableStorage("scores.cfg") as storage:
    scores = TopScores(storage)
    position = scores.add("alice", 125)   # index in the list, or -1
    scores.save()
    for entry in scores.scores():
        print(entry.name, entry.score)
```

`TableStorage` creates its file (and the file's directory) if they are
missing. If the file cannot be parsed, it reports the error on stderr and
starts with an empty table.

The storage has these methods: `get_int`, `get_string`, `set_int`,
`set_string` and `flush`. Leaving the `with` block calls `flush()`.

Without a path, `TableStorage` uses `default_path()`:

- on most systems, `~/.einstein/einsteinrc`;
- on Windows, `einstein.cfg` in the current directory.

Scores are times in seconds, and lower times rank higher. `TopScores` keeps
at most `MAX_SCORES` (10) entries, each stored as a `ScoreEntry`.
`max_score()` returns the worst time kept, or -1 if the list is empty.
`is_full()` tells whether the list holds the maximum number of entries.
`save()` writes to the storage only if the list changed since it was last
saved.

## Other helpers

- `einsteinpuzzle.tokenizer.Tokenizer` splits text into `Token`s of type
  `TokenType.WORD` or `TokenType.PARA`; a paragraph break is a blank line.
  - `next_token()` returns a `TokenType.EOF` token at the end of the text.
  - Iterating over a tokenizer stops before that EOF token.
  - `unget(token)` queues tokens to be returned again.
  - `is_finished()` tells whether the text is used up.
- `einsteinpuzzle.utils` contains:
  - `sec_to_str` formats seconds as `HH:MM:SS`.
  - `adjust_brightness` and `adjust_color` apply a gamma correction.
  - `ensure_dir_exists` creates a directory, removing a plain file that is
    in its way.
  - `read_int`, `write_int` and `decode_int` handle little-endian 32-bit
    integers.
  - `read_string` and `write_string` handle NUL-terminated UTF-8 strings on
    binary streams.
- `einsteinpuzzle.unicode` provides `to_utf8`, `from_utf8` and
  `get_utf8_length`, which raise `ConversionError` on malformed input.
  `from_utf8` stops at the first NUL byte and drops an incomplete character
  at the end of the input.

## What this package does not do

This is a library only. It has none of these parts of the game:

- a puzzle generator;
- a game screen, drawing, windows or widgets;
- sound;
- a command to start the game.

The score list has no display and no dialog for entering a name; it only
keeps and stores the entries.

## Tests

    pip install .[test]
    pytest