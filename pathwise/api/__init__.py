"""HTTP API for the learning engine."""
