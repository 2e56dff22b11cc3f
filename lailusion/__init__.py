"""La Ilusion: a colour-switching side-scrolling runner built on pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]