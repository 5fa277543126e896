"""Allow ``python -m campuspaths``."""

from campuspaths.cli import main

if __name__ == "__main__":
    main()
