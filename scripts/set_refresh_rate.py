#!/usr/bin/env python3
"""Show or change the stored auto-refresh rate without starting the server.

Usage:
  python scripts/set_refresh_rate.py [<seconds>]

Without an argument the stored rate is printed. The database used is
`settings.DB_PATH`.
"""
import sys

from autorefresh.core.properties import SystemProperties
from autorefresh.extensions.config_auto_refresh import ConfigAutoRefresh


def main(seconds: int | None = None) -> int:
    ext = ConfigAutoRefresh(properties=SystemProperties())
    ext.initialize()
    if seconds is not None:
        ext.set_refresh_rate(seconds)
    print(f"{ext.get_display_name()}: {ext.get_refresh_rate()} seconds")
    return ext.get_refresh_rate()


USAGE = "Usage: python scripts/set_refresh_rate.py [<seconds>]"


def cli(argv: list[str]) -> int:
    """Parse `argv` (without the program name) and run. Returns the exit code."""
    if len(argv) > 1:
        print(USAGE)
        return 1
    try:
        value = int(argv[0]) if argv else None
    except ValueError:
        print(f"Not an integer: {argv[0]!r}")
        print(USAGE)
        return 1
    main(value)
    return 0


if __name__ == "__main__":
    sys.exit(cli(sys.argv[1:]))
