"""
Monitoring and logging modules
"""

from .metrics_collector import MetricsCollector
from .log_manager import LogManager
from .filter_metrics import FilterMetrics
from .system_metrics import SystemMetrics

__all__ = [
    'MetricsCollector',
    'LogManager',
    'FilterMetrics',
    'SystemMetrics'
]
