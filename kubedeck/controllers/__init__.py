"""Controllers for KubeDeck."""
