import sqlite3

import pytest

from groupfun.kuji import image_names, kuji_text


@pytest.fixture
def conn():
    c = sqlite3.connect(":memory:")
    c.execute("CREATE TABLE kuji (id INTEGER PRIMARY KEY, text TEXT NOT NULL)")
    c.executemany(
        "INSERT INTO kuji (id, text) VALUES (?, ?)",
        [(1, "第一签 大吉"), (100, "第一百签 凶")],
    )
    yield c
    c.close()


def test_kuji_text_found(conn):
    assert kuji_text(conn, 1) == "第一签 大吉"
    assert kuji_text(conn, 100) == "第一百签 凶"


def test_kuji_text_missing(conn):
    with pytest.raises(LookupError):
        kuji_text(conn, 50)


def test_kuji_text_on_empty_database_raises():
    c = sqlite3.connect(":memory:")
    with pytest.raises(LookupError):
        kuji_text(c, 1)
    c.close()


def test_image_names():
    assert image_names(7) == ("7_0.jpg", "7_1.jpg")


def test_image_names_distinct_and_share_prefix():
    front, back = image_names(42)
    assert front != back
    assert front.split("_")[0] == back.split("_")[0] == "42"