"""
Domain package - ORM models, Pydantic schemas and enums.
"""
