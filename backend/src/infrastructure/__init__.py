"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain and application
interfaces: database, document storage, email and HTTP.
"""
