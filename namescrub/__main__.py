import sys

from namescrub.cli import main

if __name__ == "__main__":
    sys.exit(main())
