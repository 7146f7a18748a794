"""ProdFloor job listing backend."""

__version__ = "0.1.0"
