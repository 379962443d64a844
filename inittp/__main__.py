"""Allow ``python -m inittp``."""

from inittp.cli import main

if __name__ == "__main__":
    main()
