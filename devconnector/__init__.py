"""DevConnector API: developer profiles, posts, likes and comments."""

__version__ = "1.0.0"
