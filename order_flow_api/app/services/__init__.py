"""
Service layer.

Each service encapsulates the business rules of one domain and talks
to the database only through the repositories.  Services are stateless;
the request's session is passed to every call.
"""
