from compass.api.v1 import tools

__all__ = [
    "tools",
]
