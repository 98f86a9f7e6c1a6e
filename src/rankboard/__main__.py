"""Entry point for running rankboard as a module.

Usage:
    python -m rankboard
"""

from rankboard.app import main

if __name__ == "__main__":
    main()
