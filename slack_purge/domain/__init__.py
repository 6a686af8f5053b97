"""Domain layer — pure Python, no framework dependencies."""

from slack_purge.domain.models import (
    Attachment,
    HistoryPage,
    Message,
    PurgeResult,
    PurgeStats,
)

__all__ = [
    "Attachment",
    "HistoryPage",
    "Message",
    "PurgeResult",
    "PurgeStats",
]
