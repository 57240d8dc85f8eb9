"""
Centralized test suite for the Poultry Farm Operations backend.

Test Organization:
- conftest.py - shared users, farms, products and authenticated API clients
- integration/ - service and API integration tests, one module per area
"""
