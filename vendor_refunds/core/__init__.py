"""
Core infrastructure: configuration, exceptions and logging
"""
