"""Colours, processing blocks, chains, patches and loggers for RGB LED strips."""

__version__ = "0.1.0"