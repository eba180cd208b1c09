"""Allow ``python -m quoteboard``."""
from .cli import main

if __name__ == "__main__":
    main()
