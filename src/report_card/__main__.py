"""Allow ``python -m report_card``."""

from report_card.cli import main

raise SystemExit(main())
