"""Pure domain layer: entities, errors and the core computations."""
