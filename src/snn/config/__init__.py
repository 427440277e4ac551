"""Configuration — settings models, snn.toml discovery, and logging."""
