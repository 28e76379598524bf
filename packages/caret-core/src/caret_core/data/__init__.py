from .loader import load_report, load_yaml_typed

__all__ = [
    "load_report",
    "load_yaml_typed",
]
