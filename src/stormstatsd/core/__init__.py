"""Core domain: models, naming, configuration and ports."""
