from __future__ import annotations

from hanoi_console.cli import main

raise SystemExit(main())
