"""Allow ``python -m alttime`` to run the command line interface."""

# Local Imports
from . import main

if __name__ == "__main__":
    main()
