# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "cadence-journal",
# ]
#
# [tool.uv.sources]
# cadence-journal = { path = "." }
# ///
"""Standalone launcher for the cadence journal."""

from cadence.apps.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
