"""Configuration layer — settings resolution and logging setup."""
