# Routes package init
"""
BlogAPI Backend: API Routes Package
====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - posts.py:   GET    /posts             (list all posts)
                  GET    /posts/{id}        (get single post)
                  POST   /posts             (create post)
                  PUT    /posts/{id}        (update supplied fields)
                  DELETE /posts/{id}        (delete post)
    - health.py:  GET    /health            (service health check)

Routes stay thin: they extract the body, call the mapper and the store,
and choose the status code.
"""
