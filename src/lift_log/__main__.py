import sys

from lift_log.cli import main

sys.exit(main())
