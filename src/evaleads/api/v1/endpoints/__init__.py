"""
Endpoint modules
"""
