# Services package

from compass.services.navigator import CodebaseNavigator

__all__ = [
    "CodebaseNavigator",
]
