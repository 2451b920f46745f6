"""A small 2D sprite engine on pygame: sprites, sprite-sheet animations, TMX tile maps with collision, and a side-scrolling demo game."""

__version__ = "0.1.0"