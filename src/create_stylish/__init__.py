"""create-stylish - scaffold a Stylish JavaScript web app."""

__version__ = "0.1.0"
