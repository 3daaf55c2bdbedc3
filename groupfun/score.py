"""Daily sign-in with levels and a persistent score table."""

from __future__ import annotations

import random
import sqlite3
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

SIGN_IN_MAX = 1
SCORE_MAX = 1200
RANK_THRESHOLDS = (0, 10, 20, 50, 100, 200, 350, 550, 750, 1000, 1200)
TOP_RANK = len(RANK_THRESHOLDS) - 1
BACKGROUND_URL = "https://img.moehu.org/pic.php?id=pc"


@dataclass(frozen=True)
class SignIn:
    """Sign-in record of one user: count and time of the last update."""

    uid: int
    count: int = 0
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class SignInResult:
    """Outcome of a successful sign-in."""

    level: int
    rank: int
    coins: int
    capped: bool
    next_rank_score: int


class AlreadySignedIn(Exception):
    """Raised when a user has already signed in today."""

    def __init__(self, uid: int) -> None:
        super().__init__("今天你已经签到过了！")
        self.uid = uid


class ScoreStore:
    """SQLite tables ``score`` (uid, score) and ``sign_in`` (uid, count, updated_at)."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._db = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()
        with self._lock, self._db:
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS score ("
                "uid INTEGER PRIMARY KEY, score INTEGER NOT NULL DEFAULT 0)"
            )
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS sign_in ("
                "uid INTEGER PRIMARY KEY, count INTEGER NOT NULL DEFAULT 0, "
                "updated_at TEXT)"
            )

    def __enter__(self) -> "ScoreStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            self._db.close()

    def score_of(self, uid: int) -> int:
        """Return the user's score, creating a zero record if there is none."""
        with self._lock:
            with self._db:
                self._db.execute("INSERT OR IGNORE INTO score (uid) VALUES (?)", (uid,))
            row = self._db.execute(
                "SELECT score FROM score WHERE uid = ?", (uid,)
            ).fetchone()
            return row[0]

    def set_score(self, uid: int, score: int) -> None:
        """Insert or update the user's score."""
        with self._lock, self._db:
            self._db.execute(
                "INSERT INTO score (uid, score) VALUES (?, ?) "
                "ON CONFLICT(uid) DO UPDATE SET score = excluded.score",
                (uid, score),
            )

    def sign_in_of(self, uid: int) -> SignIn:
        """Return the user's sign-in record, creating an empty one if there is none."""
        with self._lock:
            with self._db:
                self._db.execute(
                    "INSERT OR IGNORE INTO sign_in (uid) VALUES (?)", (uid,)
                )
            count, updated = self._db.execute(
                "SELECT count, updated_at FROM sign_in WHERE uid = ?", (uid,)
            ).fetchone()
        return SignIn(
            uid, count, datetime.fromisoformat(updated) if updated else None
        )

    def set_sign_in_count(self, uid: int, count: int, now: datetime) -> None:
        """Insert or update the user's sign-in count, stamping it with ``now``."""
        with self._lock, self._db:
            self._db.execute(
                "INSERT INTO sign_in (uid, count, updated_at) VALUES (?, ?, ?) "
                "ON CONFLICT(uid) DO UPDATE SET count = excluded.count, "
                "updated_at = excluded.updated_at",
                (uid, count, now.isoformat()),
            )

    def top_scores(self, n: int) -> list[tuple[int, int]]:
        """The ``n`` highest ``(uid, score)`` pairs, highest first."""
        with self._lock:
            rows = self._db.execute(
                "SELECT uid, score FROM score ORDER BY score DESC LIMIT ?", (n,)
            ).fetchall()
        return [(uid, score) for uid, score in rows]


def rank_of(score: int) -> int:
    """Level reached by ``score``; -1 when it lies outside the rank table."""
    for rank, threshold in enumerate(RANK_THRESHOLDS):
        if score == threshold:
            return rank
        if score < threshold:
            return rank - 1
    return -1


def next_rank_score(rank: int) -> int:
    """Score needed for the level after ``rank``."""
    if rank < TOP_RANK:
        return RANK_THRESHOLDS[rank + 1]
    return SCORE_MAX


def hour_greeting(moment: datetime) -> str:
    """Greeting fitting the hour of ``moment``."""
    h = moment.hour
    if 6 <= h < 12:
        return "早上好"
    if 12 <= h < 14:
        return "中午好"
    if 14 <= h < 19:
        return "下午好"
    if 19 <= h < 24:
        return "晚上好"
    return "凌晨好"


def sign_in(
    store: ScoreStore, uid: int, now: datetime, rng: random.Random
) -> SignInResult:
    """Sign ``uid`` in for the day of ``now``; raise ``AlreadySignedIn`` on a repeat."""
    record = store.sign_in_of(uid)
    signed_today = (
        record.updated_at is not None and record.updated_at.date() == now.date()
    )
    if record.count >= SIGN_IN_MAX and signed_today:
        raise AlreadySignedIn(uid)
    if not signed_today:
        store.set_sign_in_count(uid, 0, now)
    store.set_sign_in_count(uid, record.count + 1, now)

    level = store.score_of(uid) + 1
    capped = level > SCORE_MAX
    if capped:
        level = SCORE_MAX
    store.set_score(uid, level)

    rank = rank_of(level)
    coins = 1 + rng.randrange(10) + rank * 5
    return SignInResult(level, rank, coins, capped, next_rank_score(rank))