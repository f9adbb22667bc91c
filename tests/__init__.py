"""
Test Suite for Metadata Filter.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Config-to-filter integration tests
    - fixtures/: Shared filter functions and YAML configs

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest --cov=src/metadata_filter        # With coverage
"""
