"""
Service layer abstraction.

Each service encapsulates business logic for a domain so that API
handlers never issue SQL directly.
"""
