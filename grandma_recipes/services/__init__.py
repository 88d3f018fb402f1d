"""
Grandma Recipes API: Services Layer
====================================

Business rules between the routes (HTTP) and the database.

Service inventory:
    - aggregation:     folds flat join rows into nested recipes
    - RecipeService:   recipe reads and the submission pipeline
    - GrandmaService:  contributor CRUD
    - AuthService:     signup and login
    - UserService:     account reads

Each module exposes a module-level singleton (`recipe_service`, ...) that
routes call with the request-scoped AsyncSession.
"""
