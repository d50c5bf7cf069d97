"""Allow ``python -m cadence``."""

from cadence.apps.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
