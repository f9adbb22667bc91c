"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_metadata_filter.py: Filter creation, chaining, append/extend
    - test_factory.py: Factory helpers
    - test_config_loader.py: Configuration loading/validation
    - test_builder.py: Dotted path resolution and filter building
"""
