"""allows running as ``python -m mdpreview``."""

import sys

from mdpreview import main

sys.exit(main())
