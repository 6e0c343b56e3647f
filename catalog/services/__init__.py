"""
Services Package

Helpers used by the controllers and the application factory:
- parallel.py: Run a fixed set of named reads concurrently and join them
- rate_limiter.py: Rate limiting of form submissions with slowapi
"""
