import sys

from tweers.cli import main

sys.exit(main())
