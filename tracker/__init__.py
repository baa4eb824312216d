"""Django app for the Tai Xiu tracker.

This package contains the process-memory record store, the service layer that
validates and applies mutations, and the dashboard views built on the pure
`analysis` package.
"""
