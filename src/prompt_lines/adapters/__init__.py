"""UI adapters."""
