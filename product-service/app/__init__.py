"""Product Service - CRUD API для товаров в стиле CQRS."""
