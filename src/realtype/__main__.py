"""Allow ``python -m realtype``."""

from realtype.cli import main

if __name__ == "__main__":
    main()
