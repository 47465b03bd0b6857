"""sedwords entry point for ``python -m sedwords``"""

from sedwords.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
