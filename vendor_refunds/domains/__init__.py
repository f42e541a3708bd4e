"""
Domain packages
"""
