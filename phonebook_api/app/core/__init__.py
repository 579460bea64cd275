"""Core application plumbing: settings, logging and request middleware."""
