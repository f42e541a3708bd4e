"""
Shared helpers and constants
"""
