"""Unit conversion and recipe costing for small food-service businesses."""

__version__ = "0.1.0"
