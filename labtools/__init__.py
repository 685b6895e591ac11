"""Small utilities: pangram checks, slugs, complex numbers, a circular buffer and a line editor."""

__version__ = "0.1.0"