"""
Eva Leads API: lead capture and inbound SMS notifications
"""
__version__ = "1.0.0"
