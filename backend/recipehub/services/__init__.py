# Services package init
"""
RecipeHub Backend — Services Layer
====================================

What:  Storage logic sitting between routes (HTTP) and MongoDB (persistence).
How:   Each service method takes the request's Motor database, performs one
       collection operation, and returns JSON-ready data or an ack model.

Service Inventory:
    - RecipeService: list / top-liked / get / create / update / delete / like
    - UserService: profile insert
    - documents: ObjectId parsing and BSON → JSON conversion
"""
