import sys

from plurals.cli import main

sys.exit(main())
