"""Cross-cutting API plumbing shared by the domain apps.

Holds the error taxonomy and exception handler, pagination, input
parsing helpers and request logging middleware.
"""
