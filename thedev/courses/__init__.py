from .catalog import CourseCatalog


__all__ = ["CourseCatalog"]
