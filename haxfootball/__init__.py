"""HaxFootball - rules engine and chat command layer for a football room."""

__version__ = "0.1.0"
