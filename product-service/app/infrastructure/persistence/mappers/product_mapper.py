"""
Mapper для преобразования между Product Entity и ProductModel.

Изолирует доменный слой от деталей персистентности.
"""

from datetime import timezone

from ....domain.product_context.entities import Product
from ..models import ProductModel


class ProductMapper:
    """
    Mapper между доменной сущностью Product и моделью БД ProductModel.
    
    Пример:
        >>> mapper = ProductMapper()
        >>> model = mapper.to_model(product)
        >>> entity = mapper.to_entity(model)
    """
    
    def to_entity(self, model: ProductModel) -> Product:
        """
        Преобразовать модель БД в доменную сущность.
        
        Args:
            model: Модель БД ProductModel
            
        Returns:
            Доменная сущность Product
        """
        return Product(
            id=model.id,
            name=model.name,
            price=float(model.price),
            stock=model.stock,
            created_at=self._ensure_utc(model.created_at),
            updated_at=self._ensure_utc(model.updated_at) if model.updated_at else None
        )
    
    def to_model(self, entity: Product) -> ProductModel:
        """
        Преобразовать доменную сущность в новую модель БД.
        
        ID не переносится для несохраненной сущности: его сгенерирует БД.
        """
        model = ProductModel(
            name=entity.name,
            price=entity.price,
            stock=entity.stock,
            created_at=entity.created_at,
            updated_at=entity.updated_at
        )
        if entity.id is not None:
            model.id = entity.id
        return model
    
    def update_model(self, model: ProductModel, entity: Product) -> None:
        """
        Перенести изменяемые поля сущности в существующую модель.
        
        Args:
            model: Загруженная модель БД
            entity: Доменная сущность с изменениями
        """
        model.name = entity.name
        model.price = entity.price
        model.stock = entity.stock
        model.updated_at = entity.updated_at
    
    @staticmethod
    def _ensure_utc(value):
        # SQLite теряет tzinfo при чтении
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
