"""
Entry point for running the package as a module.

Usage:
    python -m gene_ranking --input genes.yaml --mode AR
"""

from .cli import main

if __name__ == "__main__":
    main()
