import sys

from geo_coordinates.cli import main

if __name__ == "__main__":
    sys.exit(main())
