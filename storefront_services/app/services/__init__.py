"""
Service layer.

Holds the registry of the known services.  There is no business logic
behind any of the services; the registry only describes which service
binds which port and what its root route answers.
"""
