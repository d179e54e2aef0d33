"""Services layer: models, money helpers, repositories and domain services."""
