"""Recipe search domain package."""
