"""Application layer: the login form controller."""
