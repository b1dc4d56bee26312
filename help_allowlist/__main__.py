import sys

from help_allowlist.cli import main

sys.exit(main())
