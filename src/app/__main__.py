"""python -m src.app 진입점."""

import sys

from src.app.cli import main

sys.exit(main())
