"""annotations-policy — settings validation for the annotations admission policy."""

__version__ = "0.1.0"
