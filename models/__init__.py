"""
models/ - Domain Models
=======================
Plain dataclasses for the LightBnB tables. Repositories map rows into these.
"""
