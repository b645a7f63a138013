"""Allow ``python -m incgraph``."""

from incgraph.interfaces.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
