"""Core building blocks: settings, logging, errors, storage and middleware."""
