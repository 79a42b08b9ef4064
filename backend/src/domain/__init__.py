"""Domain layer: self-validating entities grouped by bounded context."""
