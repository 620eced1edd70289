"""Allow running the service with `python -m zeus`."""

from zeus.main import main

if __name__ == "__main__":
    main()
