"""Entry point for `python -m acapella_index`."""

import sys


def main():
    from acapella_index.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
