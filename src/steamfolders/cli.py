# LICENSE: AGPLv3. See LICENSE at root of repo

import argparse
import logging
import os
import sys

import appdirs

from steamfolders import VERSION
from steamfolders.app import run_interactive
from steamfolders.discovery import discover
from steamfolders.errors import DiscoveryError
from steamfolders.steamdir import get_default_steam_paths

log = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        prog="steamfolders",
        description="Browse your Steam games and Wine-prefixed non-Steam shortcuts, and open their folders",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--steam-path",
        default=None,
        help=f"Path to Steam installation. If unspecified, tries {', '.join(str(p) for p in get_default_steam_paths())}",
        required=False,
    )

    parser.add_argument(
        "--verbose",
        default=False,
        help="Write debug output to the log file",
        required=False,
        action="store_true",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    return parser.parse_args(argv)


def setup_logging(verbose, log_dir=None):
    """
    curses owns the terminal while we run, so log records go to a file.

    If the log folder can't be written (read-only home, sandbox) we run
    without a log and return None.

    setup_logging(bool, str|None) -> str|None
    """
    log_dir = log_dir or appdirs.user_log_dir("steamfolders")
    log_file = os.path.join(log_dir, "steamfolders.log")
    root = logging.getLogger("steamfolders")

    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        print(f"Warning: not logging to `{log_file}`: {e}", file=sys.stderr)
        root.handlers[:] = [logging.NullHandler()]
        return None

    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    return log_file


def main(argv=None):
    args = parse_arguments(argv)
    log_file = setup_logging(args.verbose)
    log.info("steamfolders %s starting", VERSION)

    try:
        games = discover(args.steam_path)
    except DiscoveryError as e:
        log.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        if log_file:
            print(f"See `{log_file}` for details.", file=sys.stderr)
        return 1

    if not games:
        print("No games found.")
        return 0

    try:
        run_interactive(games)
    except KeyboardInterrupt:
        log.info("Interrupted")
        return 130

    log.info("Bye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
