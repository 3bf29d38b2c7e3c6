"""Allow ``python -m gps_trips``."""

from .main import main

raise SystemExit(main())
