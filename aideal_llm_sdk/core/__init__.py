"""Core router logic: message normalization and provider routing."""
