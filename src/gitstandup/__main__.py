import sys

from gitstandup.cli import main

sys.exit(main())
