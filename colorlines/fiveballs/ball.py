"""A ball of the five-balls game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Ball:
    """A coloured ball with an identifier unique within its grid."""

    color: str
    id: int