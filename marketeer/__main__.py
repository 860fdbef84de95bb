"""
Main entry point for the Marketeer package when executed as a module.

This allows running the package with `python -m marketeer`.
"""

from marketeer.cli import main

if __name__ == '__main__':
    main()
