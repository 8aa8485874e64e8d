"""Infrastructure adapters: database, repositories and file exports."""
