"""User-facing feedback messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotificationKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    message: str
    kind: NotificationKind
    id: int
