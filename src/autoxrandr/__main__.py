"""Allow ``python -m autoxrandr``."""

from .cli import main

raise SystemExit(main())
