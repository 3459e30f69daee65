from iso8583_mock.cli._runner import run


def main() -> None:
    """Run linting."""
    import sys

    sys.exit(run(["ruff", "check", "."]))


def format() -> None:
    """Run code formatting."""
    import sys

    sys.exit(run(["ruff", "format", "."]))
