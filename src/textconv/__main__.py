"""Entry point for ``python -m textconv``."""

from textconv.app.cli import cli


def main() -> None:
    """Run the textconv command line."""
    cli()


if __name__ == "__main__":
    main()
