"""Timestamped stderr logging."""

import sys
from datetime import datetime


def log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)
