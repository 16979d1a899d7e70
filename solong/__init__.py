"""A tile-based puzzle game: .ber map reading and validation, game state, and a pygame view."""

__version__ = "0.1.0"