"""Three-rotor Enigma machine simulation and brute-force key recovery."""

__version__ = "0.1.0"
__all__ = ["__version__"]