import sys

from supersorter.cli import main

sys.exit(main())
