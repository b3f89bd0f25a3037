"""Configuration layer — the validated model, builder settings, logging."""
