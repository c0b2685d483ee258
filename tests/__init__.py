"""
Photo Vars Test Suite
File: tests/__init__.py

Test modules for placeholder substitution and shell quoting.
"""
