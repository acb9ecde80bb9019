"""
services/ - Business Logic Layer
================================
Validates caller input and formats results on top of the repositories.
"""
