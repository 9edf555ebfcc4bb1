"""Configuration and logging shared by every service."""
