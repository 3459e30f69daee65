from iso8583_mock.cli._runner import run


def main() -> None:
    """Run tests."""
    import sys

    sys.exit(run(["pytest"]))


def test_v() -> None:
    """Run tests with verbose output."""
    import sys

    sys.exit(run(["pytest", "-v"]))
