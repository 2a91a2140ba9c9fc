"""utils/ - shared helpers (logging)."""
