import time
import psutil
import logging
import threading
from datetime import datetime
from dataclasses import asdict
from typing import Dict, Any
from collections import deque
from ..filter import BloomFilter
from .filter_metrics import FilterMetrics
from .system_metrics import SystemMetrics

logger = logging.getLogger(__name__)


class MetricsCollector:
    """Collects filter occupancy and process memory metrics"""

    def __init__(self, bloom_filter: BloomFilter, history_size: int = 100):
        self.bloom_filter = bloom_filter
        self.start_time = time.time()

        self.filter_metrics = FilterMetrics()
        self.system_metrics = SystemMetrics()

        # Historical data (keep last history_size data points)
        self.metrics_history: deque = deque(maxlen=history_size)

        self._lock = threading.Lock()

    def collect_filter_metrics(self) -> FilterMetrics:
        """Read current sizing and occupancy from the filter"""
        bf = self.bloom_filter
        bits_set = bf.bits_set
        fill_ratio = bits_set / bf.bit_array_size

        self.filter_metrics = FilterMetrics(
            capacity=bf.capacity,
            error_rate=bf.error_rate,
            bit_array_size=bf.bit_array_size,
            hash_count=bf.hash_count,
            item_count=bf.item_count,
            bits_set=bits_set,
            fill_ratio=fill_ratio,
            estimated_false_positive_rate=fill_ratio ** bf.hash_count,
            memory_bytes=bf.memory_bytes
        )
        return self.filter_metrics

    def collect_system_metrics(self) -> SystemMetrics:
        """Collect current process and system memory metrics"""
        try:
            process = psutil.Process()
            self.system_metrics.process_rss_mb = process.memory_info().rss / (1024 * 1024)

            memory = psutil.virtual_memory()
            self.system_metrics.memory_used_mb = memory.used / (1024 * 1024)
            self.system_metrics.memory_percent = memory.percent
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.warning(f"Failed to collect system metrics: {e}")
        return self.system_metrics

    def is_saturated(self) -> bool:
        """True once the filter has taken as many adds as it was sized for"""
        return self.bloom_filter.item_count >= self.bloom_filter.capacity

    def get_current_snapshot(self) -> Dict[str, Any]:
        """Get current metrics snapshot"""
        with self._lock:
            self.collect_filter_metrics()
            self.collect_system_metrics()

            if self.is_saturated():
                logger.info(
                    f"Bloom filter at capacity ({self.filter_metrics.item_count} items), "
                    f"estimated false positive rate {self.filter_metrics.estimated_false_positive_rate:.4f}"
                )

            return {
                'timestamp': datetime.now().isoformat(),
                'uptime_seconds': time.time() - self.start_time,
                'filter_metrics': asdict(self.filter_metrics),
                'system_metrics': asdict(self.system_metrics)
            }

    def store_historical_snapshot(self) -> Dict[str, Any]:
        """Store current metrics in historical data"""
        snapshot = self.get_current_snapshot()
        self.metrics_history.append(snapshot)
        return snapshot
