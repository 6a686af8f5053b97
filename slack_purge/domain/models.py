"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Attachment:
    fallback: str = ""
    text: str = ""
    pretext: str = ""
    title: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Attachment":
        return cls(
            fallback=data.get("fallback") or "",
            text=data.get("text") or "",
            pretext=data.get("pretext") or "",
            title=data.get("title") or "",
        )


@dataclass(frozen=True)
class Message:
    """One message from conversations.history. ``ts`` identifies it in the channel."""

    ts: str
    type: str = ""
    user: str = ""
    text: str = ""
    attachments: List[Attachment] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Message":
        return cls(
            ts=data.get("ts") or "",
            type=data.get("type") or "",
            user=data.get("user") or "",
            text=data.get("text") or "",
            attachments=[Attachment.from_api(a) for a in data.get("attachments") or []],
        )

    @property
    def label(self) -> str:
        """Text if present, else the first attachment's title, else ""."""
        if self.text:
            return self.text
        if self.attachments:
            return self.attachments[0].title
        return ""


@dataclass(frozen=True)
class HistoryPage:
    """One page of channel history.

    When ``ok`` is False only ``error`` is meaningful; ``messages`` must not
    be acted upon. ``next_cursor`` is opaque and passed back unchanged.
    """

    ok: bool
    messages: List[Message] = field(default_factory=list)
    has_more: bool = False
    next_cursor: str = ""
    error: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "HistoryPage":
        metadata = data.get("response_metadata") or {}
        return cls(
            ok=data.get("ok") is True,
            messages=[Message.from_api(m) for m in data.get("messages") or []],
            has_more=data.get("has_more") is True,
            next_cursor=metadata.get("next_cursor") or "",
            error=data.get("error"),
        )


@dataclass
class PurgeStats:
    pages: int = 0
    messages: int = 0
    deleted: int = 0


@dataclass
class PurgeResult:
    """Outcome of a purge run, handed back to the entry point."""

    success: bool
    mode: str = "all"  # "single" or "all"
    stats: PurgeStats = field(default_factory=PurgeStats)
    error: Optional[str] = None
