"""
Test Fixtures - Shared Filter Functions and Configurations.

This package contains reusable test fixtures:
    - sample_filters.yaml: Sample filter set configuration
    - profiles/: Profiles applied on top of the sample config
    - filters.py: Filter functions referenced by dotted path
"""
