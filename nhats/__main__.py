import sys

from nhats.cli import main

sys.exit(main())
