import sys

from mev_detect.cli import main

sys.exit(main())
