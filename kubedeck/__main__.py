"""Allow ``python -m kubedeck``."""

from kubedeck.cli import main

if __name__ == "__main__":
    main()
