"""Allow running the tool as ``python -m copyko``."""

from copyko.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
