"""Allow running as ``python -m godocjson``."""

import sys

from godocjson.cli import main

sys.exit(main())
