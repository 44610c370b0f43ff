from __future__ import annotations

from bfmachine.main import main

raise SystemExit(main())
