# LICENSE: AGPLv3. See LICENSE at root of repo

import logging
import os
import platform
import subprocess
from pathlib import Path

from steamfolders.errors import LaunchError

log = logging.getLogger(__name__)


def get_open_command():
    """The program that opens a folder in the user's file manager.

    get_open_command() -> str
    """
    system = platform.system()
    if system == "Darwin":
        return "open"
    if system == "Windows":
        return "explorer"
    return "xdg-open"


def open_folder(path, open_command=None):
    """Open path in the default file manager without waiting for it.

    Only the spawn itself is checked, whatever the file manager does
    afterwards is its own business.

    open_folder(Path) -> None
    """
    path = Path(path)
    if not path.is_dir():
        raise LaunchError("Folder does not exist.")

    argv = [open_command or get_open_command(), str(path)]
    kwargs = {}
    if os.name == "posix":
        # Detach so the file manager survives us and never touches the screen
        kwargs["start_new_session"] = True

    try:
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            **kwargs,
        )
    except OSError as e:
        raise LaunchError(f"Could not run `{argv[0]}`: {e.strerror or e}") from e
    log.info("Spawned %s", argv)
