"""
BeanLifeCycle Enum

Defines the lifecycle of beans served by a container
"""

from enum import Enum


class BeanLifeCycle(Enum):
    """Lifecycle of beans"""
    SINGLETON = "SINGLETON"
    FACTORY = "FACTORY"
