"""Infrastructure layer - drivers, UI adapters and logging setup."""
