"""Entry point for the warpclock CLI.

Usage:
    python -m warpclock <command> [args...]
    warpclock <command> [args...]     (after pip install -e .)
"""

from warpclock.adapters.cli import run_cli


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
