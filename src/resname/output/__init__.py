"""Output layer — ServiceResult rendering for the CLI."""
