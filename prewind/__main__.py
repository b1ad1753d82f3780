"""Entry point for prewind."""

import sys
import traceback

from prewind.app import main


def run() -> None:
    """Run prewind with standard Python tracebacks."""
    try:
        exit_code = main()
    except Exception:
        # Print standard Python traceback instead of Rich's fancy one
        traceback.print_exc()
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
