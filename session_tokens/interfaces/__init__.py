"""Token store interfaces."""
