"""Module entrypoint for ``python -m zenreport``."""

from zenreport.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
