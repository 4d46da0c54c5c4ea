"""Pallas base-field arithmetic and Poseidon P128Pow5T3 constants."""

__version__ = "0.1.0"

__all__ = ["field", "round_constants", "mds", "spec"]