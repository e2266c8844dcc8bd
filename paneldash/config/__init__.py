"""Configuration for paneldash."""
