"""Allow ``python -m rulegov``."""

import sys

from .cli import main

main(sys.argv[1:])
