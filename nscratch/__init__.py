"""nscratch - scratchpad window toggler for the niri compositor."""

__version__ = "0.1.0"
