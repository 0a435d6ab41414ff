import sys

from jsxlite.cli import main

sys.exit(main())
