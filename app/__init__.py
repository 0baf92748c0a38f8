"""CondoPulse: condominium executive dashboard service."""

__version__ = "0.1.0"
