"""Domain layer - entities, store interfaces and business services."""
