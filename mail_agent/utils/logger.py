"""
Logging setup for the mail agent

Console output plus two files under log_dir:
  - mail_agent.log: INFO and above, rotated at midnight
  - mail_agent_error.log: ERROR and above (failed sends, LLM errors), size-rotated

Call setup_logging() once in main.py; modules use get_logger(__name__).
"""
import logging
import logging.handlers
from pathlib import Path

LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "production": logging.INFO,
}

# clients whose request-level logging drowns out the agent's own
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "openai")

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


def setup_logging(
    environment: str = "development",
    log_dir: str = "logs",
    app_name: str = "mail_agent"
) -> None:
    """
    Configure the root logger

    Args:
        environment: "development" | "production" | "test"
        log_dir: directory for the log files
        app_name: log file prefix
    """
    level = LEVELS.get(environment, logging.INFO)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setLevel(level)

    app_file = logging.handlers.TimedRotatingFileHandler(
        filename=log_path / f"{app_name}.log",
        when="midnight",
        backupCount=14,
        encoding="utf-8"
    )
    app_file.setLevel(logging.INFO)

    error_file = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}_error.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8"
    )
    error_file.setLevel(logging.ERROR)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in (console, app_file, error_file):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"🔧 Logging initialized: environment={environment}, level={logging.getLevelName(level)}, dir={log_path.absolute()}"
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger (pass __name__)"""
    return logging.getLogger(name)
