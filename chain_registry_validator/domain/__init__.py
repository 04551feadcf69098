"""Domain layer: records, value objects, predicates and exceptions."""
