"""
Базовые классы для запросов (Queries).

Запрос представляет намерение получить данные без изменения состояния.
Query Handler обрабатывает запрос и возвращает данные.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict


# Тип переменная для результата запроса
TResult = TypeVar('TResult')


class Query(BaseModel, ABC):
    """
    Базовый класс для запросов.
    
    Запрос - это объект, который представляет намерение
    получить данные без изменения состояния системы.
    
    Важно: Запросы НЕ должны изменять состояние системы!
    
    Пример:
        >>> class GetProductQuery(Query):
        ...     product_id: int
        >>> 
        >>> query = GetProductQuery(product_id=1)
    """
    
    # Запросы неизменяемы
    model_config = ConfigDict(frozen=True)


class QueryHandler(ABC, Generic[TResult]):
    """
    Базовый класс для обработчиков запросов.
    
    Query Handler отвечает за выполнение запроса:
    - Получение данных из репозиториев
    - Преобразование в DTO
    - Возврат результата
    
    Type Parameters:
        TResult: Тип результата выполнения запроса
    """
    
    @abstractmethod
    async def handle(self, query: Query) -> TResult:
        """
        Обработать запрос.
        
        Args:
            query: Запрос для обработки
            
        Returns:
            Результат выполнения запроса
        """
        pass
