"""Allow ``python -m flutter_scaffold``."""

from flutter_scaffold.cli import main

main()
