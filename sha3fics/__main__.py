from __future__ import annotations

import sys

from sha3fics.cli import main

sys.exit(main())
