"""Data-access layer for the blog user subsystem."""
