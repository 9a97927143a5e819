"""Story file readers."""
