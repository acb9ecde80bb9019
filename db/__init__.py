"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool and schema initialization for LightBnB.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
