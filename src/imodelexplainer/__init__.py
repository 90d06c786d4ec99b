"""Interactive explainer for the four-I model."""

__version__ = "0.1.0"
