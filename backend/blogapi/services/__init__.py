# Services package init
"""
BlogAPI Backend: Services Layer
================================

What:  Logic sitting between routes (HTTP) and the database (persistence).

Service Inventory:
    - post_mapper: validates request bodies into typed drafts/updates and
                   shapes stored posts into responses (pure functions)
    - PostStore:   persistence operations on the posts collection

Both can be tested without HTTP: the mapper with plain dicts, the store
with a session against SQLite or a mocked AsyncSession.
"""
