"""
Tests package for azure-armrest.

Contains:
- unit/: Unit tests with the HTTP transport mocked out
"""
