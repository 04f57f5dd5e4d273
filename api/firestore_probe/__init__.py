"""Firestore connectivity probe API."""

__version__ = "1.0.0"
