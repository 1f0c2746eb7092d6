import sys

from sortviz.cli import main

sys.exit(main())
