"""Random picks from text databases: Japanese grammar notes and simp diaries."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional

_GRAMMAR_COLUMNS = (
    "id, tag, name, pronunciation, usage, meaning, explanation, example, grammar_url"
)


@dataclass(frozen=True)
class Grammar:
    """One Japanese grammar note."""

    id: int
    tag: str = ""
    name: str = ""
    pronunciation: str = ""
    usage: str = ""
    meaning: str = ""
    explanation: str = ""
    example: str = ""
    grammar_url: str = ""

    def describe(self) -> str:
        """Readable card of the note."""
        return (
            f"ID:\n{self.id}\n\n标签:\n{self.tag}\n\n语法名:\n{self.name}\n\n"
            f"发音:\n{self.pronunciation}\n\n用法:\n{self.usage}\n\n"
            f"意思:\n{self.meaning}\n\n解说:\n{self.explanation}\n\n示例:\n{self.example}"
        )


def _ensure_grammar(conn: sqlite3.Connection) -> None:
    conn.execute(
        "CREATE TABLE IF NOT EXISTS grammar (id INTEGER PRIMARY KEY, tag TEXT, "
        "name TEXT, pronunciation TEXT, usage TEXT, meaning TEXT, explanation TEXT, "
        "example TEXT, grammar_url TEXT)"
    )


def _grammar(row) -> Optional[Grammar]:
    if row is None:
        return None
    return Grammar(row[0], *("" if value is None else value for value in row[1:]))


def random_grammar_by_tag(conn: sqlite3.Connection, tag: str) -> Optional[Grammar]:
    """A random note whose tag contains ``tag``, or None."""
    _ensure_grammar(conn)
    row = conn.execute(
        f"SELECT {_GRAMMAR_COLUMNS} FROM grammar WHERE tag LIKE ? "
        "ORDER BY RANDOM() LIMIT 1",
        (f"%{tag}%",),
    ).fetchone()
    return _grammar(row)


def random_grammar_by_keyword(
    conn: sqlite3.Connection, keyword: str
) -> Optional[Grammar]:
    """A random note whose name or pronunciation contains ``keyword``, or None."""
    _ensure_grammar(conn)
    pattern = f"%{keyword}%"
    row = conn.execute(
        f"SELECT {_GRAMMAR_COLUMNS} FROM grammar "
        "WHERE (name LIKE ? OR pronunciation LIKE ?) ORDER BY RANDOM() LIMIT 1",
        (pattern, pattern),
    ).fetchone()
    return _grammar(row)


def random_tiangou(conn: sqlite3.Connection) -> str:
    """A random diary entry; raise ``LookupError`` when there is none."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS tiangou (id INTEGER PRIMARY KEY, text TEXT NOT NULL)"
    )
    row = conn.execute(
        "SELECT text FROM tiangou ORDER BY RANDOM() LIMIT 1"
    ).fetchone()
    if row is None:
        raise LookupError("no diary entries")
    return row[0]