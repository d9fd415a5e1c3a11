# Routes package init
"""
RecipeHub Backend — API Routes Package
========================================

Route Inventory:
    - recipes.py: GET    /recipes/top-liked     (six most-liked recipes)
                  GET    /recipes               (all, or ?email=<owner>)
                  GET    /recipes/{id}          (one recipe)
                  POST   /recipes               (create; ownerEmail required)
                  PUT    /recipes/{id}          (overwrite editable fields)
                  DELETE /recipes/{id}          (delete)
                  PATCH  /recipes/{id}/like     (likes += 1)
    - users.py:   POST   /users                 (store a user profile)
    - health.py:  GET    /                      (welcome message)
                  GET    /health                (service + database health)

Routes are thin: extract path/query/body, call the service, return its result.
"""
