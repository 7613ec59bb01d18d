"""
Shared kernel: базовые классы доменного слоя.
"""

from .base_entity import Entity
from .repository import Repository

__all__ = ["Entity", "Repository"]
