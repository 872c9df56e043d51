"""Source file parsing."""
