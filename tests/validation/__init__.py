"""Validation test suite for CPN Tools file format conformance.

This package contains tests to ensure generated files are well-formed and
internally consistent so CPN Tools can load them.
"""
