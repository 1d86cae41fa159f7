"""
Boundary layer for external system integrations.

Adapters for the relational database (``db``) and the Wealthbox CRM API
(``wealthbox``).
"""
