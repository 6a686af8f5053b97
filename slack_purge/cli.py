"""Command-line entry point.

Usage:
    slack-purge -token xoxp-... -channel C0123 [-timestamp 1700000000.000100] [-execute]
    python -m slack_purge --token xoxp-... --channel C0123 --execute
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from slack_purge.adapters.slack.client import SlackClient
from slack_purge.config import PurgeConfig, __version__
from slack_purge.infrastructure.log import log
from slack_purge.infrastructure.throttle import CallThrottle
from slack_purge.purge import run_purge


def _non_negative_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {raw!r}")
    return value


def build_parser(defaults: Optional[PurgeConfig] = None) -> argparse.ArgumentParser:
    defaults = defaults or PurgeConfig.from_env()
    parser = argparse.ArgumentParser(
        prog="slack-purge",
        description="Delete messages from a Slack channel.",
    )
    parser.add_argument(
        "-token", "--token",
        default=defaults.token,
        help="Slack user token (default: $SLACK_TOKEN).",
    )
    parser.add_argument(
        "-channel", "--channel",
        default=defaults.channel_id,
        help="Target channel ID (default: $SLACK_CHANNEL_ID).",
    )
    parser.add_argument(
        "-timestamp", "--timestamp",
        default="",
        help="Target message timestamp. If omitted, every message in the channel is deleted.",
    )
    parser.add_argument(
        "-execute", "--execute",
        action="store_true",
        help="Actually delete messages. Without it the run is a dry run.",
    )
    parser.add_argument(
        "-api-host", "--api-host",
        dest="api_host",
        default=defaults.api_host,
        help="Slack Web API base URL (default: $SLACK_API_HOST or https://slack.com/api/).",
    )
    parser.add_argument(
        "-delay", "--delay",
        type=_non_negative_float,
        default=defaults.delay_seconds,
        help="Seconds to pause after every API call (default: 1.0).",
    )
    parser.add_argument(
        "-version", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = PurgeConfig(
        token=args.token,
        channel_id=args.channel,
        api_host=args.api_host,
        delay_seconds=args.delay,
    )
    if not config.is_configured:
        log("A token and a channel ID are required (-token/-channel or SLACK_TOKEN/SLACK_CHANNEL_ID).")
        return 1

    client = SlackClient(
        token=config.token,
        channel_id=config.channel_id,
        api_host=config.api_host,
        throttle=CallThrottle(interval_seconds=config.delay_seconds),
    )
    result = asyncio.run(
        run_purge(client, timestamp=args.timestamp, execute=args.execute)
    )

    if not result.success:
        log(result.error)
        return 1

    stats = result.stats
    api_calls = client.throttle.get_status()["calls"]
    if result.mode == "all":
        log(
            f"Processed {stats.messages} message(s) across {stats.pages} page(s), "
            f"{stats.deleted} deleted, {api_calls} API call(s)."
        )
    log("Messages were successfully deleted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
