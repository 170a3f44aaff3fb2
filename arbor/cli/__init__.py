"""
Command-line interface for Arbor.
"""
