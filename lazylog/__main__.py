"""Module entrypoint for ``python -m lazylog``."""

from .cli import main


if __name__ == "__main__":
    main()
