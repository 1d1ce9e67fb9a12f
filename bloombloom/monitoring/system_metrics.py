from dataclasses import dataclass


@dataclass
class SystemMetrics:
    """Process and system memory metrics"""
    process_rss_mb: float = 0.0
    memory_used_mb: float = 0.0
    memory_percent: float = 0.0
