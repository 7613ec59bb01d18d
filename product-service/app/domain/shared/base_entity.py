"""
Base Entity class for Domain-Driven Design.

This module provides the foundation for all domain entities following DDD principles.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """
    Base class for all domain entities.
    
    An entity is defined by its identity, not its attributes.
    Two entities with the same ID are considered equal, even if their attributes differ.
    
    The identifier is generated by the database, so a freshly constructed
    entity has ``id=None`` until a repository persists it. Transient entities
    are only equal to themselves.
    
    Attributes:
        id: Unique identifier (None until persisted)
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """
    
    model_config = ConfigDict(arbitrary_types_allowed=True)
    
    id: Optional[int] = Field(None, description="Unique identifier")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)"
    )
    updated_at: Optional[datetime] = Field(
        None,
        description="Last update timestamp (UTC)"
    )
    
    @property
    def is_transient(self) -> bool:
        """True if entity has not been persisted yet."""
        return self.id is None
    
    def mark_updated(self) -> None:
        """Mark entity as updated (sets updated_at to current time)."""
        self.updated_at = datetime.now(timezone.utc)
    
    def __eq__(self, other: Any) -> bool:
        """
        Compare entities by identity.
        
        Args:
            other: Object to compare with
            
        Returns:
            True if entities have the same ID and type
        """
        if not isinstance(other, Entity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id and type(self) == type(other)
    
    def __hash__(self) -> int:
        """
        Generate hash based on identity.
        
        Returns:
            Hash of entity ID and type
        """
        if self.id is None:
            return id(self)
        return hash((self.id, type(self)))
    
    def __repr__(self) -> str:
        """
        String representation of entity.
        
        Returns:
            String with entity type and ID
        """
        return f"{self.__class__.__name__}(id={self.id})"
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert entity to dictionary representation.
        
        Returns:
            Dictionary with entity data
        """
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
