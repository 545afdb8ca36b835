"""Allow ``python -m songlist.cli`` execution."""

from songlist.cli.resolve import main

main()
