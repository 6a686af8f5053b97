"""Outbound ports — interfaces for the remote message store."""

from typing import Optional, Protocol, runtime_checkable

from slack_purge.domain.models import HistoryPage, PurgeStats


@runtime_checkable
class MessageStorePort(Protocol):
    """Interface the purge service needs from a chat platform client."""

    @property
    def channel_id(self) -> str: ...

    async def fetch_history_page(self, cursor: str = "") -> HistoryPage: ...

    async def delete_message(self, ts: str, execute: bool) -> Optional[str]: ...

    async def delete_all(self, page: HistoryPage, execute: bool) -> PurgeStats: ...
