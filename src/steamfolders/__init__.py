# LICENSE: AGPLv3. See LICENSE at root of repo

VERSION = "0.1.0"
