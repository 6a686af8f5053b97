import sys

from slack_purge.cli import main

sys.exit(main())
