"""Core layer: result types, errors, enums, configuration, wiring."""
