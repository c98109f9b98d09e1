"""Models for KubeDeck TUI."""
