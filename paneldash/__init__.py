"""
paneldash - panel composition and event routing for terminal dashboards
"""

__version__ = "0.1.0"
