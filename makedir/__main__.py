"""
Main entry point for the makedir package.

Allows ``python -m makedir [directories] [options]``.
"""

from makedir.cli import main

if __name__ == "__main__":
    main()
