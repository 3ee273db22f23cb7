"""Security utilities: JWT, password hashing, rate limiting."""
