from __future__ import annotations

from pension_planner.cli import main

raise SystemExit(main())
