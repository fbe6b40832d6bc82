"""View and edit the ID3v2 title, artist, album, year, genre and comment frames of MP3 files."""

__version__ = "0.1.0"
__all__ = ["__version__"]