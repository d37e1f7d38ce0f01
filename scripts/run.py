import sys

from fabricboot.app.main_app import main

if __name__ == "__main__":
    sys.exit(main())
