import sys

from .cli.filter_image import main

if __name__ == "__main__":
    sys.exit(main())
