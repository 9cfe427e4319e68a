"""Configuration: TOML discovery, settings layering, and logging setup."""
