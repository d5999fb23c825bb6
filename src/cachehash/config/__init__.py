from .config import HashConfig

__all__ = ["HashConfig"]
