# LICENSE: AGPLv3. See LICENSE at root of repo


class SteamFoldersError(Exception):
    """Base class for everything steamfolders raises on purpose"""


class DiscoveryError(SteamFoldersError):
    """Steam or its game list could not be read. Fatal at startup."""


class SteamNotFoundError(DiscoveryError):
    def __init__(self, searched):
        self.searched = list(searched)
        paths = ", ".join(f"`{p}`" for p in self.searched) or "(nothing)"
        super().__init__(
            f"Could not find a Steam installation (looked in {paths}). Use --steam-path for non-standard installs."
        )


class ParseFailureError(DiscoveryError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse `{path}`: {reason}")


class LaunchError(SteamFoldersError):
    """Opening a folder failed. Never fatal, the UI keeps running."""
