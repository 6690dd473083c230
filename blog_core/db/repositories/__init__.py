"""
Per-domain repository modules for database access.

Import the module you need, e.g. ``from blog_core.db.repositories import users``.
"""
