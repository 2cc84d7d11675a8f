import sys

from vespa_deploy.cli import vespa


def main() -> None:
    """CLI entrypoint."""
    sys.exit(vespa())


if __name__ == "__main__":  # pragma: no cover
    main()
