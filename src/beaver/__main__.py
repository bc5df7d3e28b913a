"""Allow running Beaver with ``python -m beaver``."""

from .cli import main

main(prog_name="beaver")
