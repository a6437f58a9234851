"""A one- or two-player vertical scrolling arcade shooter built on pygame."""

__version__ = "0.1.0"