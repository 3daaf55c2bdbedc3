"""Per-group picture folders of 'wives', drawn once a day per member."""

from __future__ import annotations

import hashlib
import random
from datetime import date
from typing import Iterable, Optional

NO_WIFE = "一个wife也没有哦~"
GRANT_WORDS = ("设置", "授予", "让")
REVOKE_WORDS = ("取消", "撤销", "不让")
PERMISSION_COMMAND = "所有人均可添加wife"

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def group_folder(gid: int) -> str:
    """Folder name of a group: its number written in base 36."""
    if gid == 0:
        return "0"
    sign = "-" if gid < 0 else ""
    n = abs(gid)
    digits = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_DIGITS[r])
    return sign + "".join(reversed(digits))


def extract_name(text: str, command: str) -> str:
    """Name following the last ``command`` in ``text``, without spaces or slashes.

    An empty string means no name was given.
    """
    compact = text.replace(" ", "")
    at = compact.rfind(command)
    if at < 0:
        return ""
    name = compact[at + len(command):]
    return name.replace("/", "").replace("\\", "")


def daily_pick(names: Iterable[str], nickname: str, day: date) -> str:
    """Pick the wife of ``nickname`` for ``day``; the same inputs always pick the same one.

    Raises ``LookupError`` when there is nobody to pick.
    """
    pool = sorted(names)
    if not pool:
        raise LookupError(NO_WIFE)
    if len(pool) == 1:
        return pool[0]
    digest = hashlib.md5(
        f"{nickname}{day.year}{day.month}{day.day}".encode("utf-8")
    ).digest()
    seed = int.from_bytes(digest[:8], "little", signed=True)
    return pool[random.Random(seed).randrange(len(pool))]


def parse_permission(text: str) -> Optional[bool]:
    """Whether a command grants (True) or revokes (False) everyone's right to add; None otherwise."""
    compact = text.replace(" ", "")
    at = compact.rfind(PERMISSION_COMMAND)
    if at < 0:
        return None
    verb = compact[:at]
    if verb in GRANT_WORDS:
        return True
    if verb in REVOKE_WORDS:
        return False
    return None