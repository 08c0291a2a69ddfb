"""Team battle simulator with the Chaves cast, and small circle, trigonometry and graph utilities."""

__version__ = "0.1.0"