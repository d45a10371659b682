# LICENSE: AGPLv3. See LICENSE at root of repo

import binascii
import ctypes
from dataclasses import dataclass
from pathlib import Path

TAG_STEAM = "steam"
TAG_NON_STEAM = "non-steam"
NON_STEAM_LABEL = "Non-Steam: "


def get_steam_shortcut_id(exe, appname):
    """Generate the legacy id for a non-steam shortcut.

    Older shortcuts.vdf files don't store an appid, Steam derived it from the
    exe and the name instead.

    get_steam_shortcut_id(str, str) -> int
    """
    # https://github.com/boppreh/steamgrid/blob/c796e612c67925413317f4012bdc771326f173c8/games.go#L100-L137
    unique_id = "".join([exe, appname])
    return binascii.crc32(str.encode(unique_id)) | 0x80000000


def to_unsigned_id(app_id):
    """shortcuts.vdf stores ids as signed int32, config.vdf keys are unsigned.

    to_unsigned_id(int) -> int
    """
    return ctypes.c_uint32(app_id).value


@dataclass(frozen=True)
class GameRecord:
    """
    One row in the list: something we know how to open a folder for.
    """

    name: str
    target_path: Path
    is_non_steam: bool
    app_id: int = 0

    def __post_init__(self):
        if not self.name:
            raise ValueError("GameRecord needs a non-empty name")

    def display_text(self):
        label = NON_STEAM_LABEL if self.is_non_steam else ""
        return f"{label}{self.name} (App ID: {self.app_id})"
