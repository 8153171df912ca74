"""Scene parsing, XPM textures, player movement, sprite projection and BMP screenshots."""

__version__ = "0.1.0"