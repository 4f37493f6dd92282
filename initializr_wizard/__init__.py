"""Interactive terminal wizard for generating Spring Initializr projects."""

__version__ = "0.1.0"
