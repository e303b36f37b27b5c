"""
Version 1 of the API.

This subpackage bundles all endpoints for the first public version of
the dashboard data API.  Breaking changes to the envelope or the
filter parameters belong in a new version subpackage.
"""
