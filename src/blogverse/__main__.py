"""Entry point for 'python -m blogverse' command."""

from blogverse.cli import main

if __name__ == "__main__":
    main()
