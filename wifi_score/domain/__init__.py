"""Domain layer: link measurements and score reports."""
