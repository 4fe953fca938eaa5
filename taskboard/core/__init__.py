"""Core: configuration, exception handlers, and application lifespan."""
