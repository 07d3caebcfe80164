"""
Command-line Tools Package

This package provides the command-line entry points for envdiff:

- diff.py: Compare two env files (``envdiff``)
- scaffold.py: Generate an env file with placeholder values (``envdiff-template``)
"""
