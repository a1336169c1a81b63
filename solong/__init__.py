"""A tile-based collect-and-escape game: map reading, game rules, images and a pygame front end."""

__version__ = "0.1.0"