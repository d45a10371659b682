# LICENSE: AGPLv3. See LICENSE at root of repo

import sys

from steamfolders.cli import main

sys.exit(main())
