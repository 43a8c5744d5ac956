"""Domain layer: models and calculators."""
