"""Allow ``python -m chain_registry_validator``."""

from .cli import main

raise SystemExit(main())
