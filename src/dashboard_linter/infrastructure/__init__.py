"""Infrastructure layer — concrete implementations of domain ports."""
