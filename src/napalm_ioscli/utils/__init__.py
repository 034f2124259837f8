"""Configuration planners and rendering helpers."""
