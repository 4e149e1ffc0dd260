"""Small puzzle solutions: ciphers, string games, number tricks and grid simulations."""

__version__ = "0.1.0"