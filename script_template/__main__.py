from __future__ import annotations

import sys

from .template_main import main

raise SystemExit(main(sys.argv[1:]))
