# Services package init
"""
Social Media API Backend: Services Layer
==========================================

What:  Domain logic between routes (HTTP) and repositories (persistence).
How:   Stateless singletons; every method receives the request's AsyncSession
       and builds the repositories it needs.

Service Inventory:
    - AccountService: registration rules and username lookup for login
    - MessageService: message validation and CRUD orchestration

Contract:
    A rejected operation returns None; routes decide the status code.
    Unexpected storage failures are wrapped in DatabaseError.
"""
