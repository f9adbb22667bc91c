"""
Integration Tests - YAML Config to Filtered Values.

Test Files:
    - test_filter_from_config.py: Config loading, building and filtering
"""
