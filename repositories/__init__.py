"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories validate payloads against the model schema and return plain dict rows.
"""
