"""Color vision deficiency simulation for BGRA pixel arrays and byte buffers."""

__version__ = "1.0.0"
__all__ = ["color", "params", "simulate"]