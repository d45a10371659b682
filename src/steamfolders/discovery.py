# LICENSE: AGPLv3. See LICENSE at root of repo

import logging

from steamfolders.sources.shortcuts import ShortcutSource
from steamfolders.sources.steam import SteamAppsSource
from steamfolders.steamdir import SteamDir

log = logging.getLogger(__name__)


def get_sources(steam_dir):
    # Order is the display order: native games first, then shortcuts
    return [
        SteamAppsSource(steam_dir),
        ShortcutSource(steam_dir),
    ]


def discover(steam_path=None):
    """
    Returns a list of GameRecords for everything we can open a folder for.

    Raises SteamNotFoundError if there is no Steam installation, and
    ParseFailureError if one of its files is malformed.
    """
    steam_dir = SteamDir.locate(steam_path)
    games = []
    for source in get_sources(steam_dir):
        found = source.collect_games()
        log.debug("%s (%s): %d games", source.get_display_name(), source.get_source_id(), len(found))
        games += found
    log.info("Discovered %d games in total", len(games))
    return games
