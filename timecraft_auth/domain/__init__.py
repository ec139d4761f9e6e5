"""Domain layer: credentials, form state, validation rules, events, ports."""
