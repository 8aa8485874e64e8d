"""Application layer orchestrating the domain and the store."""
