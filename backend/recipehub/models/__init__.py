# Document layout package init
"""
RecipeHub Backend — Document Layouts
======================================

What:  Field names, defaults, and update rules for the MongoDB collections.
Why:   MongoDB does not enforce a schema; these modules are the contract the
       services follow when they read and write documents.
"""
