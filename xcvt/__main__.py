import sys

from xcvt.cli import main

if __name__ == "__main__":
    sys.exit(main())
