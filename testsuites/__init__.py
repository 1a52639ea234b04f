"""
Test suites package.

Kept importable so suites can share test doubles (e.g. `testsuites.unit.fakes`).
"""
