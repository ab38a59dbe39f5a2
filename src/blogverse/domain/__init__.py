"""Domain layer: entities, result types and business services."""
