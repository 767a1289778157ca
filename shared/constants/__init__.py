from .alerts import CPU_THRESHOLD_PERCENT, AlertSubjects
from .environments import Environment
from .namespaces import Namespaces, Statistics

__all__ = [
    "AlertSubjects",
    "CPU_THRESHOLD_PERCENT",
    "Environment",
    "Namespaces",
    "Statistics",
]
