import sys

from factorial_prompt.main import main

if __name__ == "__main__":
    sys.exit(main())
