"""Core rules engine package for the card game 500."""

__all__ = [
    "cards",
    "table",
    "deck",
    "encode",
    "trump",
    "avondale",
    "bidding",
    "trick",
    "mechanics",
    "kitty",
    "claims",
    "scoring",
    "rules_schema",
    "state",
    "game",
]
