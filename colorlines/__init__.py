"""Color Lines puzzle game in two variants: classic and five-balls."""

__version__ = "1.0.0"