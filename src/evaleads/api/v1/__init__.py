"""
Version 1 API
"""
