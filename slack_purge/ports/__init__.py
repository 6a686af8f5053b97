"""Port interfaces (Hexagonal Architecture)."""

from slack_purge.ports.outbound import MessageStorePort

__all__ = ["MessageStorePort"]
