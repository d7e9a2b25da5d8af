"""Finances app package.

Payment transactions recorded against bookings. Gateway integrations
are out of scope; transactions are written by API clients.
"""
