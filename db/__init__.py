"""
db/ - Database Layer
====================
Opens PostgreSQL connections and bootstraps the `books` table.
This layer is the lowest in the architecture and only depends on config and utils.
"""
