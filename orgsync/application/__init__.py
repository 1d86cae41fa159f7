"""
Application layer.

Service orchestrators coordinating persistence, authorization and external
integrations for each use case.
"""
