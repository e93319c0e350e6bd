"""Domain models: definitions, runtime entities and pure rules."""
