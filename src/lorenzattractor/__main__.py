"""Command-line interface."""
from lorenzattractor.main import main

if __name__ == "__main__":
    main()
