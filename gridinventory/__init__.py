"""Grid-based spatial inventory model: tags, fragments, manifests, grids and stacking."""

__version__ = "0.1.0"