"""Entry point for running transnet as a module.

Usage:
    python -m transnet inspect response.xml
"""

from .cli import main

if __name__ == "__main__":
    main()
