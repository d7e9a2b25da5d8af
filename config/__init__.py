"""Top-level package for Django configuration.

This package exposes application configuration for the StayHub rental
marketplace. It contains settings modules for different environments and
entry points for WSGI and ASGI.
"""
