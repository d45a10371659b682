# LICENSE: AGPLv3. See LICENSE at root of repo

import abc

from steamfolders.defs import GameRecord


class GameSource(abc.ABC):
    """One kind of entry in the list, read from a SteamDir.

    Subclasses are registered in discovery.get_sources(), whose order is the
    order they appear on screen.
    """

    @abc.abstractmethod
    def collect_games(self) -> list[GameRecord]:
        """Read-only scan for openable games.

        Every record's target_path is absolute and was an existing folder at
        scan time, anything else is skipped (and logged), not returned.
        Calling this twice on an unchanged install gives the same list in
        the same order. Malformed Steam files raise ParseFailureError.
        """

    @abc.abstractmethod
    def get_source_id(self) -> str:
        """Short tag for logs, one of the defs.TAG_* constants"""

    @abc.abstractmethod
    def get_display_name(self) -> str:
        """Human readable name for logs"""
