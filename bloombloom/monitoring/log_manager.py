import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Dict, Any, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def reset_handlers(logger: logging.Logger):
    """Close and detach every handler on logger"""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class LogManager:
    """Logging setup with console output and optional daily log files"""

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def _file_handler(self, name: str, level: int) -> logging.FileHandler:
        today = datetime.now().strftime('%Y%m%d')
        handler = logging.FileHandler(self.log_dir / f"{name}_{today}.log")
        handler.setLevel(level)
        return handler

    def setup_logging(self, log_level: str):
        """Route the root logger to the console and, with a log directory, to files"""
        formatter = logging.Formatter(LOG_FORMAT)

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper()))
        reset_handlers(root_logger)

        self.perf_logger = logging.getLogger('performance')
        self.perf_logger.setLevel(logging.INFO)
        self.perf_logger.propagate = False
        reset_handlers(self.perf_logger)

        handlers = [logging.StreamHandler()]
        handlers[0].setLevel(logging.INFO)

        if self.log_dir is None:
            self.perf_logger.addHandler(logging.NullHandler())
        else:
            handlers.append(self._file_handler('bloombloom', logging.DEBUG))
            handlers.append(self._file_handler('errors', logging.WARNING))
            # Bare JSON lines, no formatter
            self.perf_logger.addHandler(self._file_handler('performance', logging.INFO))

        for handler in handlers:
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)

    def log_performance_event(self, event_type: str, **kwargs):
        """Log a JSON performance event"""
        event_data = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            **kwargs
        }
        self.perf_logger.info(json.dumps(event_data, default=str))

    def export_metrics_json(self, metrics_data: Dict[str, Any], filename: str = None) -> Path:
        """Export metrics to a JSON file in the log directory"""
        if self.log_dir is None:
            raise RuntimeError("LogManager has no log directory to export metrics to")
        export_path = self.log_dir / (filename or f"metrics_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json")

        with open(export_path, 'w') as f:
            json.dump(metrics_data, f, indent=2, default=str)

        logging.getLogger(__name__).info(f"Metrics exported to {export_path}")
        return export_path
