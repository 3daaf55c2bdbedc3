"""Sleep tracking: who went to bed or got up in which order, and for how long."""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime, timedelta
from pathlib import Path
from typing import Union

MORNING_START = 6
MORNING_END = 12
EVENING_START = 21
EVENING_END = 3

_HOUR_US = 3600 * 1_000_000
_MINUTE_US = 60 * 1_000_000
_SECOND_US = 1_000_000


def _stamp(moment: datetime) -> str:
    return moment.isoformat(timespec="microseconds")


def _truncdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    return -((-a) // b) if a < 0 else a // b


class SleepStore:
    """SQLite table ``sleep_manage`` holding each member's last sleep or wake time."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._db = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()
        with self._lock, self._db:
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS sleep_manage ("
                "id INTEGER PRIMARY KEY AUTOINCREMENT, group_id INTEGER NOT NULL, "
                "user_id INTEGER NOT NULL, sleep_time TEXT NOT NULL)"
            )

    def __enter__(self) -> "SleepStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            self._db.close()

    def _touch(self, gid: int, uid: int, now: datetime) -> timedelta:
        row = self._db.execute(
            "SELECT sleep_time FROM sleep_manage WHERE group_id = ? AND user_id = ? "
            "ORDER BY id LIMIT 1",
            (gid, uid),
        ).fetchone()
        with self._db:
            if row is None:
                self._db.execute(
                    "INSERT INTO sleep_manage (group_id, user_id, sleep_time) VALUES (?, ?, ?)",
                    (gid, uid, _stamp(now)),
                )
                return timedelta(0)
            self._db.execute(
                "UPDATE sleep_manage SET sleep_time = ? WHERE group_id = ? AND user_id = ?",
                (_stamp(now), gid, uid),
            )
        return now - datetime.fromisoformat(row[0])

    def _position(self, gid: int, now: datetime, since: datetime) -> int:
        (count,) = self._db.execute(
            "SELECT COUNT(*) FROM sleep_manage WHERE group_id = ? "
            "AND sleep_time <= ? AND sleep_time >= ?",
            (gid, _stamp(now), _stamp(since)),
        ).fetchone()
        return count

    def sleep(self, gid: int, uid: int, now: datetime) -> tuple[int, timedelta]:
        """Record going to bed; return the place in tonight's order and the time awake."""
        if now.hour >= EVENING_START:
            since = now.replace(hour=EVENING_START, minute=0, second=0)
        elif now.hour <= EVENING_END:
            since = now.replace(hour=0, minute=0, second=0) - timedelta(
                hours=24 - EVENING_START
            )
        else:
            since = datetime.min
        with self._lock:
            awake = self._touch(gid, uid, now)
            return self._position(gid, now, since), awake

    def get_up(self, gid: int, uid: int, now: datetime) -> tuple[int, timedelta]:
        """Record getting up; return the place in this morning's order and the time slept."""
        since = now.replace(hour=MORNING_START, minute=0, second=0)
        with self._lock:
            slept = self._touch(gid, uid, now)
            return self._position(gid, now, since), slept


def split_duration(delta: timedelta) -> tuple[int, int, int]:
    """Split a duration into whole hours, minutes and seconds, truncating toward zero."""
    total = delta // timedelta(microseconds=1)
    hour = _truncdiv(total, _HOUR_US)
    minute = _truncdiv(total - hour * _HOUR_US, _MINUTE_US)
    second = _truncdiv(total - hour * _HOUR_US - minute * _MINUTE_US, _SECOND_US)
    return hour, minute, second


def is_morning(moment: datetime) -> bool:
    """Good mornings count from 6 to 12 o'clock."""
    return MORNING_START <= moment.hour <= MORNING_END


def is_evening(moment: datetime) -> bool:
    """Good nights count from 21 o'clock to 3 in the morning."""
    return moment.hour >= EVENING_START or moment.hour <= EVENING_END


def _meaningless(hour: int, minute: int, second: int) -> bool:
    return (hour == 0 and minute == 0 and second == 0) or hour >= 24


def good_morning_text(position: int, slept: timedelta) -> str:
    """Reply to a good morning."""
    hour, minute, second = split_duration(slept)
    if _meaningless(hour, minute, second):
        return f"早安成功！你是今天第{position}个起床的"
    return (
        f"早安成功！你的睡眠时长为{hour}时{minute}分{second}秒,"
        f"你是今天第{position}个起床的"
    )


def good_night_text(position: int, awake: timedelta) -> str:
    """Reply to a good night."""
    hour, minute, second = split_duration(awake)
    if _meaningless(hour, minute, second):
        return f"晚安成功！你是今天第{position}个睡觉的"
    return (
        f"晚安成功！你的清醒时长为{hour}时{minute}分{second}秒,"
        f"你是今天第{position}个睡觉的"
    )