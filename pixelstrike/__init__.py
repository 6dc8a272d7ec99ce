"""Pixel Strike - a 160x240 vertical arcade shooter built on pygame."""

__version__ = "0.1.0"
