"""
Loaders

Build genes for ranking from analysis files.
"""

from .analysis_loader import genes_from_dict, load_genes

__all__ = [
    "genes_from_dict",
    "load_genes",
]
