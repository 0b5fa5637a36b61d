"""Doubly linked circular lists of integers, a registry of them, and an interactive console menu."""

__version__ = "0.1.0"
__all__ = ["circular", "registry", "menu"]