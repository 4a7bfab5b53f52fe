"""A terminal farming game: plant, water and harvest pumpkins and melons."""

__version__ = "0.1.0"