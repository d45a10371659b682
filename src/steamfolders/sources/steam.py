# LICENSE: AGPLv3. See LICENSE at root of repo

import logging

import steamfolders.defs as defs
import steamfolders.sources.source as source
from steamfolders.steamdir import get_ci

log = logging.getLogger(__name__)


class SteamAppsSource(source.GameSource):
    """Games installed through Steam itself, opened at their install folder."""

    def __init__(self, steam_dir):
        self.steam_dir = steam_dir

    def collect_games(self) -> list[defs.GameRecord]:
        games = []
        for library in self.steam_dir.library_folders():
            log.info("Scanning Steam library (%s)...", library)
            for app in self.steam_dir.app_manifests(library):
                name = get_ci(app, "name")
                installdir = get_ci(app, "installdir")
                if not name:
                    log.debug("Skipping app %s since it has no name", get_ci(app, "appid"))
                    continue
                if not installdir:
                    log.debug("Skipping '%s' since it has no installdir", name)
                    continue

                install_path = self.steam_dir.install_dir(library, installdir)
                if not install_path.is_dir():
                    log.warning(
                        "Path `%s` does not exist for game %s, skipping!", install_path, name
                    )
                    continue

                try:
                    app_id = int(get_ci(app, "appid", 0))
                except ValueError:
                    app_id = 0

                games.append(
                    defs.GameRecord(
                        name=name,
                        target_path=install_path.absolute(),
                        is_non_steam=False,
                        app_id=app_id,
                    )
                )

        log.info("Collected %d games from Steam libraries", len(games))
        return games

    def get_source_id(self) -> str:
        return defs.TAG_STEAM

    def get_display_name(self) -> str:
        return "Steam"
