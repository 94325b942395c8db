import sys

from keyboard_predict.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
