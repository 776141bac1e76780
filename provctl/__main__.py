"""
Punto de entrada: python -m provctl
"""

from provctl.cli.app import main

if __name__ == "__main__":
    main()
