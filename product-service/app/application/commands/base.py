"""
Базовые классы для команд (Commands).

Команда представляет намерение изменить состояние системы.
Command Handler обрабатывает команду и выполняет соответствующие действия.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict


# Тип переменная для результата команды
TResult = TypeVar('TResult')


class Command(BaseModel, ABC):
    """
    Базовый класс для команд.
    
    Команда - это объект, который представляет намерение
    изменить состояние системы. Команды всегда именуются
    в повелительном наклонении (CreateProduct, UpdateStock и т.д.).
    
    Команды должны быть:
    - Неизменяемыми (immutable)
    - Самодостаточными (содержать все необходимые данные)
    - Валидируемыми (через Pydantic)
    
    Пример:
        >>> class RenameProductCommand(Command):
        ...     product_id: int
        ...     name: str
        >>> 
        >>> command = RenameProductCommand(product_id=1, name="Mouse")
    """
    
    # Команды неизменяемы
    model_config = ConfigDict(frozen=True)


class CommandHandler(ABC, Generic[TResult]):
    """
    Базовый класс для обработчиков команд.
    
    Command Handler отвечает за выполнение команды:
    - Загрузка сущности из репозитория
    - Вызов доменного поведения (проверка инвариантов)
    - Сохранение изменений
    - Возврат результата
    
    Type Parameters:
        TResult: Тип результата выполнения команды
    """
    
    @abstractmethod
    async def handle(self, command: Command) -> TResult:
        """
        Обработать команду.
        
        Args:
            command: Команда для обработки
            
        Returns:
            Результат выполнения команды
            
        Raises:
            DomainError: При нарушении бизнес-правил
            InfrastructureError: При ошибках инфраструктуры
        """
        pass
