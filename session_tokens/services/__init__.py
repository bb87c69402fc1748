"""Session services."""
