"""
Version 1 of the API.

This subpackage bundles the recipe and health endpoints.  It is
mounted under both ``/api`` and ``/api/v1`` by ``main.create_app``.
"""
