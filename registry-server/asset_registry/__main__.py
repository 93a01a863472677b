import sys

from asset_registry.cli import main

if __name__ == "__main__":
    sys.exit(main())
