"""
Storefront end-to-end test package.

Keeps `storefront_e2e` importable for:
  - the page-object layer used by scenarios
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports
"""
