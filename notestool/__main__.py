"""Allows running the application with ``python -m notestool``."""

from notestool.main import main

if __name__ == "__main__":
    main()
