"""Infrastructure layer: adapters for logging, events and authentication."""
