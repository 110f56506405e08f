"""Output layer: renders ServiceResult as rich text, JSON or a quiet status."""
