# DAOs package init
"""
Tuiter Backend — Data-Access Objects
======================================

What:  Storage layer between routes (HTTP) and MongoDB.
How:   One class per resource. Each async method issues exactly one
       database call and returns a document model or an outcome type.
       DAOs hold only a collection handle, so one instance can serve any
       number of concurrent requests.

DAO Inventory:
    - TuitDao: tuits collection (find, find by author, create, update, delete)
    - UserDao: users collection (CRUD plus username/credential lookups)

Routes obtain DAOs through FastAPI dependencies (get_tuit_dao, get_user_dao)
rather than module-level singletons; tests override those dependencies.
"""
