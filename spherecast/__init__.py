"""Ray casting of a lit, bouncing sphere under a rotating light, shown with pygame."""

__version__ = "0.1.0"