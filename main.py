"""Entry point for running copyko from a source checkout."""

from copyko.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
