"""
Wealthbox CRM boundary.

Exports:
  - WealthboxClient: async HTTP client for the Wealthbox REST API
  - WealthboxContact: parsed user record returned by the API
"""

from orgsync.boundary.wealthbox.wealthbox_client import WealthboxClient, WealthboxContact

__all__ = ["WealthboxClient", "WealthboxContact"]
