"""Test suite for timecraft-auth.

- unit/: Unit tests for each layer (core, domain, infrastructure, application)
"""
