"""
Service layer abstraction.

Services encapsulate the business logic of a domain and talk to the
document store handed to them, so API handlers never touch the store
directly.
"""
