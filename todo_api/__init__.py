"""Todo API backend."""
