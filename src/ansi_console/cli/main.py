"""Main CLI entry point."""

import sys


def main() -> None:
    """Main CLI entry point."""
    from ansi_console.cli.app import create_app

    try:
        app = create_app()
    except ImportError as e:
        print(f"ansi-console: {e}", file=sys.stderr)
        sys.exit(1)
    app()


if __name__ == "__main__":
    main()
