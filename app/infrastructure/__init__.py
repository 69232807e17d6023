"""
Infrastructure layer for the Freelance Hub API.

This layer contains the implementation details for external systems integration:
- Database (MongoDB through Motor)
- Authentication (JWT session cookies)
- HTTP routers and error handling

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
