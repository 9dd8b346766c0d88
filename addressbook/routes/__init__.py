"""
Routes package for the address book service.

Contains the JSON blueprints for the contacts collection and item
resources plus the service health check.
"""
