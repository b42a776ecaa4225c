"""Request-facing collaborators: URL building, request context and markup."""
