"""Entry point for ``python -m claude_messages``."""

from .cli import main

raise SystemExit(main())
