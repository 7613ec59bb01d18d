"""
Persistence layer: SQLAlchemy модели, мапперы и реализации репозиториев.
"""
