"""
Grandma Recipes API: Routes Package
====================================

Route inventory:
    - recipes.py:   GET  /recipes, GET /recipes/{nameRecipe},
                    GET  /recipe/{idRecipe}, POST /recipes/new
    - grandmas.py:  GET  /grandmas, GET /grandma/{id},
                    POST /grandma, PUT /grandma/{id}, DELETE /grandma/{id}
    - users.py:     POST /signup, POST /login, GET /users, GET /user/{id},
                    PUT  /logout
    - health.py:    GET  /health

Handlers are thin: they parse the request, call a service and return its
response model. Business rules live in grandma_recipes.services.
"""
