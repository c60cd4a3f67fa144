"""
Test suites package.

Layout:
  - ui_testing/framework: browser lifecycle, base page, config, logging
  - ui_testing/pages: LoginPage / SecurePage page objects
  - ui_testing/tests: live login/logout scenarios
  - unit: offline checks for the framework itself

Kept importable so `run_tests.py` and IDEs can resolve `testsuites.*` paths.
"""
