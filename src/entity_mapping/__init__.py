"""
Entity Mapping - SQL table and column naming for entity field storage.

Maps entities composed of named fields (each field made of one or more
property columns) onto relational tables, so the storage layer can build
statements without hardcoding table or column names.
"""

__version__ = "0.1.0"
