# oodnotes/config/defaults.py
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "development",
    "debug": False,

    # Logging configuration
    "logging": {
        "level": "WARNING",
        "destination": "stdout",
        "file_path": "logs/oodnotes.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Memento caretaker
    "memento": {
        "undo_policy": "restore_latest",
        "max_history": 0,
    },

    # CLI output
    "output": {
        "format": "json",
    },
}
