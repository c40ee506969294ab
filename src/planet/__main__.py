"""Allow ``python -m planet``."""

from .cli import main

main()
