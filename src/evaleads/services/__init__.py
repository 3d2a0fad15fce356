"""
Request gating and notification services
"""
