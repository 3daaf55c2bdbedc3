"""Verdicts on image classification scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

THRESHOLD = 0.3


@dataclass(frozen=True)
class Picture:
    """Classifier probabilities for one picture."""

    drawings: float = 0.0
    hentai: float = 0.0
    neutral: float = 0.0
    porn: float = 0.0
    sexy: float = 0.0


def _flags(picture: Picture) -> list[str]:
    return [
        label
        for label, score in (
            ("hentai", picture.hentai),
            ("porn", picture.porn),
            ("hso", picture.sexy),
        )
        if score > THRESHOLD
    ]


def judge(picture: Picture) -> str:
    """Describe a picture on request."""
    if picture.neutral > THRESHOLD:
        return "普通哦"
    if picture.drawings > THRESHOLD or picture.neutral < THRESHOLD:
        kind = "二次元"
    else:
        kind = "三次元"
    return "".join([kind, *(" " + flag for flag in _flags(picture))])


def auto_judge(picture: Picture) -> Optional[str]:
    """Verdict for automatic review, or None when nothing deserves a comment."""
    if picture.neutral > THRESHOLD:
        return None
    kind = "二次元" if picture.drawings > THRESHOLD else "三次元"
    flags = _flags(picture)
    if not flags:
        return None
    return "".join([kind, *(" " + flag for flag in flags)])