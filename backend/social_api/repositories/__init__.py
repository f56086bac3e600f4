# Repositories package init
"""
Social Media API Backend: Storage Adapters
============================================

What:  Thin wrappers over an AsyncSession giving each entity the CRUD calls
       the services rely on: save, find_by_id, find_all, delete_by_id,
       exists_by_id, plus the two equality lookups (find_by_username,
       find_by_posted_by).
How:   One repository instance per session; constructed by the services for
       each call. Repositories flush but never commit; the request-scoped
       session in get_db_session owns the transaction.
"""
