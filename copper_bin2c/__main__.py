"""Package entry point for ``python -m copper_bin2c``.

WHY: Users run the converter as ``python -m copper_bin2c [-c] file.bin``
without installing the console script.

HOW: Delegates to the CLI's main() and exits with its status code.
"""

import sys

from copper_bin2c.cli import main

if __name__ == "__main__":
    sys.exit(main())
