"""Object metadata, object classification and property loaders for FBX 7.4 node trees."""

__version__ = "0.1.0"