"""A small terminal text editor with search, tab rendering and a status bar."""

__version__ = "0.1.0"
__all__ = ["__version__"]