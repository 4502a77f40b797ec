from __future__ import annotations

from backlight_ctl.cli import main

raise SystemExit(main())
