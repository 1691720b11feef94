"""Scene state for the orbit canvas: entities, registry and drag handling."""
