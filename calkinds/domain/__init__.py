"""Domain layer: kind enumerations, compatibility table and domain errors."""
