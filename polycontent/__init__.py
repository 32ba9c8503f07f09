"""polycontent: multilingual content catalog resolution."""

__version__ = "0.1.0"
