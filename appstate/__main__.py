import sys

from appstate.cli import main

sys.exit(main())
