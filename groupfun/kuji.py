"""Senso-ji fortune slips: slip images and their written interpretations."""

from __future__ import annotations

import sqlite3

IMAGE_BASE = "https://gitcode.net/u011570312/senso-ji-omikuji/-/raw/main/"
SLIP_COUNT = 100


def kuji_text(conn: sqlite3.Connection, number: int) -> str:
    """Interpretation of slip ``number``; raise ``LookupError`` when it is missing."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS kuji (id INTEGER PRIMARY KEY, text TEXT NOT NULL)"
    )
    row = conn.execute("SELECT text FROM kuji WHERE id = ?", (number,)).fetchone()
    if row is None:
        raise LookupError(f"no fortune slip {number}")
    return row[0]


def image_names(number: int) -> tuple[str, str]:
    """File names of the front and back images of slip ``number``."""
    return f"{number}_0.jpg", f"{number}_1.jpg"