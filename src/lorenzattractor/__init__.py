"""Interactive visualizer for the Lorenz attractor."""

__version__ = "0.1.0"
