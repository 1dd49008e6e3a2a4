"""
Notification data models.

A notification is the short-lived message shown after every user action.
"""

from dataclasses import dataclass
from enum import Enum


class NotificationKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    text: str
    kind: NotificationKind
    expires_at: float  # Clock reading after which the message is gone

    @property
    def is_error(self) -> bool:
        return self.kind == NotificationKind.ERROR
