"""Supply placement search over road networks, shift modelling and layout, and display helpers."""

__version__ = "0.1.0"