"""Save and restore xrandr display layouts as named profiles."""

__version__ = "0.1.0"
