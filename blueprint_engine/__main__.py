"""Allow ``python -m blueprint_engine``."""

from blueprint_engine.cli import main

main()
