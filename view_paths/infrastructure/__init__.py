"""Infrastructure layer: cache stores, logging and renderer adapters."""
