from __future__ import annotations

from socialsheet.cli.main import main

raise SystemExit(main())
