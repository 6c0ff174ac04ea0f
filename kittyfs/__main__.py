"""Allow ``python -m kittyfs``."""

from .cli import main

if __name__ == "__main__":
    main()
