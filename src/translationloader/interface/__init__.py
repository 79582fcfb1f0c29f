"""
Interface layer package.

Command line entry points and console rendering.
"""
