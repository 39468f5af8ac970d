"""
Remapping between labeled arrays and BART's positional dimension layout.
"""

from ._remapper import bart_layout_dims, from_bart_layout, to_bart_layout

__all__ = [
    to_bart_layout.__name__,
    bart_layout_dims.__name__,
    from_bart_layout.__name__,
]
