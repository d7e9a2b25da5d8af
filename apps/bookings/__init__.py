"""Bookings app package.

Creates bookings from raw guest requests: ordered validation, price
derivation from the property's nightly rate and, when enabled, blocking
the booked nights in the availability ledger.
"""
