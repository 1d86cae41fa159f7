"""
OrgSync: multi-tenant account management with Wealthbox contact sync.
"""

__version__ = "0.1.0"
