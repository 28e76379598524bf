from .extractor import extract_snippet

__all__ = ["extract_snippet"]
