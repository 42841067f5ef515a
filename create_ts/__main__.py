"""Allow ``python -m create_ts``."""

from create_ts.cli import main

if __name__ == "__main__":
    main()
