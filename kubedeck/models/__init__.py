"""Data models for KubeDeck."""
