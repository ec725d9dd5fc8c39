"""
Logging configuration for the training price calculator.
Call setup_logging() once when the Streamlit script starts.
"""
import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Structured JSON log lines for machine parsing."""
    def format(self, record):
        entry = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        for key in ("file_name", "total", "training_type", "travel_costing"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Readable console format."""
    def format(self, record):
        ts = datetime.now().strftime("%H:%M:%S")
        return f"{ts} [{record.levelname[0]}] {record.name}: {record.getMessage()}"


def setup_logging(level="INFO", json_logs=False):
    """
    Configure the root logger with a single console handler.

    Args:
        level: Log level name; unknown names fall back to INFO
        json_logs: Emit JSON lines instead of the human format
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    # Streamlit reruns the script on every interaction
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(JSONFormatter() if json_logs else HumanFormatter())
    root.addHandler(console)

    for name in ("PIL", "reportlab", "matplotlib"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("training_quote").debug("Logging initialized at %s", level)
