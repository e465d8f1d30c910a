"""
Domain Layer - Entities, rules and contracts of the incubator program.

This layer has no dependency on frameworks, databases or transports.
"""
