import sys

from buildtask.cli import main

sys.exit(main())
