"""
Base Repository interface for Domain-Driven Design.

This module provides the foundation for all repository interfaces following DDD principles.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from app.domain.shared.base_entity import Entity


# Type variable for entity type
TEntity = TypeVar('TEntity', bound=Entity)
TId = TypeVar('TId')


class Repository(ABC, Generic[TEntity, TId]):
    """
    Base interface for all repositories.
    
    A repository provides the illusion of an in-memory collection of domain objects.
    It encapsulates the logic required to access data sources and provides a more
    object-oriented view of the persistence layer.
    
    Principles:
    - Abstraction: Hide persistence details from domain layer
    - Collection-like: Provide collection-like interface (add, get, remove)
    - Domain-focused: Work with domain entities, not database models
    - Single responsibility: One repository per aggregate root
    
    Usage:
        class ProductRepository(Repository[Product, int]):
            async def find_by_name(self, name: str) -> Optional[Product]:
                pass
    """
    
    @abstractmethod
    async def find_by_id(self, id: TId) -> Optional[TEntity]:
        """
        Get entity by identifier.
        
        Args:
            id: Entity identifier
            
        Returns:
            Entity if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def add(self, entity: TEntity) -> TEntity:
        """
        Add new entity to repository.
        
        Args:
            entity: Transient entity to add
            
        Returns:
            The same entity with its generated identifier assigned
        """
        pass
    
    @abstractmethod
    async def update(self, entity: TEntity) -> None:
        """
        Update existing entity in repository.
        
        Args:
            entity: Entity to update
        """
        pass
    
    @abstractmethod
    async def remove(self, id: TId) -> None:
        """
        Remove entity from repository.
        
        Args:
            id: Entity identifier
        """
        pass
    
    @abstractmethod
    async def exists(self, id: TId) -> bool:
        """
        Check if entity exists.
        
        Args:
            id: Entity identifier
            
        Returns:
            True if entity exists, False otherwise
        """
        pass
    
    @abstractmethod
    async def list_all(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[TEntity]:
        """
        List all entities with optional pagination.
        
        Args:
            limit: Maximum number of entities to return
            offset: Number of entities to skip
            
        Returns:
            List of entities
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """
        Count total number of entities.
        
        Returns:
            Total count
        """
        pass
