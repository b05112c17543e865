"""Allow ``python -m monvoyagepascher``."""

import sys

from monvoyagepascher.main import main

sys.exit(main())
