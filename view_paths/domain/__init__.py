"""Domain layer: ports, value objects and mount policy."""
