"""In-memory catalogue of travel offers, discounts, currencies and a reservation registry."""

__version__ = "0.1.0"