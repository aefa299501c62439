"""Configuration values for chatterm."""
