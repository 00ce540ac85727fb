"""Console desk for restaurant table reservations, orders and order reports."""

__version__ = "0.1.0"
__all__ = ["__version__"]