"""
Доменная сущность Product.

Товар каталога: название, цена и остаток на складе.
Инвариант: остаток никогда не бывает отрицательным.
"""

from typing import Any, Dict
from pydantic import ConfigDict, Field, ValidationError, field_validator

from ...shared.base_entity import Entity
from ....core.errors import InvalidProductError, InvalidStockError

# Цена хранится как NUMERIC(12, 2)
PRICE_DECIMALS = 2


class Product(Entity):
    """
    Товар каталога.
    
    Создается один раз через ``Product.create`` и получает ID при
    сохранении в репозиторий. Остаток меняется только через
    ``update_stock``. Каждое присваивание поля проходит валидацию,
    поэтому инварианты нельзя обойти прямой записью атрибута.
    
    Атрибуты:
        name: Название товара
        price: Цена (неотрицательная, округляется до копеек)
        stock: Остаток на складе (неотрицательный)
    
    Пример:
        >>> product = Product.create(name="Keyboard", price=49.9, stock=10)
        >>> product.update_stock(7)
        >>> product.stock
        7
    """
    
    model_config = ConfigDict(validate_assignment=True)
    
    name: str = Field(..., min_length=1, max_length=255, description="Название товара")
    price: float = Field(..., ge=0, description="Цена")
    stock: int = Field(default=0, description="Остаток на складе")
    
    @field_validator("stock")
    @classmethod
    def validate_stock(cls, value: int) -> int:
        if value < 0:
            raise InvalidStockError(stock=value)
        return value
    
    @field_validator("price")
    @classmethod
    def round_price(cls, value: float) -> float:
        return round(value, PRICE_DECIMALS)
    
    @classmethod
    def create(cls, name: str, price: float, stock: int = 0) -> "Product":
        """
        Создать новый (еще не сохраненный) товар.
        
        Args:
            name: Название товара
            price: Цена
            stock: Начальный остаток
            
        Returns:
            Новый товар с id=None
            
        Raises:
            InvalidStockError: Если stock < 0
        """
        if stock < 0:
            raise InvalidStockError(stock=stock)
        return cls(name=name, price=price, stock=stock)
    
    def update_stock(self, new_stock: int) -> None:
        """
        Установить новый остаток.
        
        Raises:
            InvalidStockError: Если new_stock < 0 (сущность не изменяется)
        """
        if new_stock < 0:
            raise InvalidStockError(stock=new_stock, product_id=self.id)
        self.stock = new_stock
        self.mark_updated()
    
    def update_details(self, name: str, price: float) -> None:
        """
        Изменить название и цену товара.
        
        Оба значения проверяются до записи: при ошибке сущность
        остается без изменений.
        
        Raises:
            InvalidProductError: Если название пустое или цена отрицательная
        """
        try:
            checked = self.model_validate(
                {**self.model_dump(), "name": name, "price": price}
            )
        except ValidationError as e:
            raise InvalidProductError(
                product_id=self.id,
                fields=[".".join(str(part) for part in err["loc"]) for err in e.errors()]
            ) from e
        
        self.name = checked.name
        self.price = checked.price
        self.mark_updated()
    
    @property
    def in_stock(self) -> bool:
        """Есть ли товар в наличии."""
        return self.stock > 0
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
        }
