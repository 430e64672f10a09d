"""Lumen: global city brightness game state service."""
