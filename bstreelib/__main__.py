"""Allow ``python -m bstreelib`` to run the word tracker."""

import sys

from .wordtracker.cli import main

sys.exit(main())
