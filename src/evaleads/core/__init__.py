"""
Core configuration and dependencies
"""
