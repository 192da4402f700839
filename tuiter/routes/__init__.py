# Routes package init
"""
Tuiter Backend — API Routes Package
=====================================

What:  HTTP route handlers (the controllers) for each resource.

Route Inventory:
    - tuits.py:   GET    /tuits                     (all tuits)
                  GET    /users/{uid}/tuits         (tuits by author)
                  GET    /tuits/{tid}               (one tuit or null)
                  POST   /users/{uid}/tuits         (create)
                  PUT    /tuits/{tid}               (update)
                  DELETE /tuits/{tid}               (delete)
    - users.py:   GET/POST /users, GET/PUT/DELETE /users/{uid},
                  DELETE /users, GET/DELETE /users/username/{username}
    - health.py:  GET    /health

Design Principle:
    Handlers are THIN: read path/body parameters, call one DAO method,
    return its value. Errors are raised by DAOs and formatted by the
    global handlers in main.py.
"""
