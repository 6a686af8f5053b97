"""Top-level purge control: one message, or the whole channel history."""

from slack_purge.adapters.slack.client import SlackClientError
from slack_purge.domain.models import PurgeResult, PurgeStats
from slack_purge.infrastructure.log import log
from slack_purge.ports.outbound import MessageStorePort


async def run_purge(
    client: MessageStorePort,
    timestamp: str = "",
    execute: bool = False,
) -> PurgeResult:
    """Delete the message at ``timestamp``, or every message when it is empty.

    Errors never escape: they come back as ``PurgeResult(success=False)``.
    """
    if not execute:
        log("Dry run: nothing will be deleted. Pass -execute to delete messages.")

    if timestamp:
        log(
            f"Will delete the message posted at {timestamp} "
            f"in the channel ID: {client.channel_id}"
        )
        try:
            await client.delete_message(timestamp, execute)
        except SlackClientError as e:
            return PurgeResult(success=False, mode="single", error=str(e))
        stats = PurgeStats(messages=1, deleted=1 if execute else 0)
        return PurgeResult(success=True, mode="single", stats=stats)

    log("Will delete all Messages in the channel.")
    try:
        first = await client.fetch_history_page("")
        stats = await client.delete_all(first, execute)
    except SlackClientError as e:
        return PurgeResult(success=False, mode="all", error=str(e))
    return PurgeResult(success=True, mode="all", stats=stats)
