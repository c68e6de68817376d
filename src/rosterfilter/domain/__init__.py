"""Domain layer: roster entities, filter value objects, predicates."""
