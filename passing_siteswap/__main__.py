import sys

from passing_siteswap.cli import main

sys.exit(main())
