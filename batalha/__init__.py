"""Team battle simulator with characters, attack weapons and defensive gear."""

__version__ = "0.1.0"
__all__ = ["armas", "personagens", "simulador", "principal"]