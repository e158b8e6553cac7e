"""Run the example driver with ``python -m mlinterp``."""

from .driver import main as driver_main


def main() -> None:
    """Entry point for ``python -m mlinterp``."""
    driver_main()


if __name__ == "__main__":
    main()
