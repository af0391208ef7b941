"""Launch the rating control preview window."""

import sys

def main():
    from main import main as _preview_main
    sys.exit(_preview_main())

if __name__ == "__main__":
    main()
