"""
Service layer abstraction.

Each service encapsulates the logic for a domain and depends only on
repository contracts, so API handlers never talk to storage directly.
"""
