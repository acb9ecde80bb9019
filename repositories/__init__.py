"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific LightBnB table.
Repositories receive raw rows from the database and return domain model objects.
Empty results come back as None or [], database errors propagate to the caller.
"""
