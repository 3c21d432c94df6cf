"""Allow ``python -m vanity``."""

from vanity.cli import main

main()
