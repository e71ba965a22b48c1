"""Convert textures, cubemaps and shaders into NBR binary resource files."""

__version__ = "0.1.0"