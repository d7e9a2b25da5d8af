"""Properties app package.

Listings and the per-day availability ledger: range queries, upserts
keyed by property and date, and range reservations.
"""
