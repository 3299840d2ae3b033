import inspect
import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists.
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message.
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logger() -> None:
    # https://loguru.readthedocs.io/en/stable/api/logger.html#record
    logger.remove()
    logger.configure(extra={"remote": "-", "path": "-"})
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.add(
        sys.stdout,
        colorize=True,
        format="<level>{level: <8}</level> "
        "| <light-blue>{extra[remote]}</light-blue>"
        ":<light-green>{extra[path]}</light-green> "
        "| <yellow>{name}:{line}</yellow> "
        "| <level>{message}</level>",
    )

    werkzeug_logger = logging.getLogger("werkzeug")
    werkzeug_logger.setLevel(logging.INFO)
    werkzeug_logger.propagate = True


def add_file_sink(log_file: str) -> int:
    return logger.add(
        log_file,
        level=logging.INFO,
        colorize=False,
        rotation="500 MB",
        retention=10,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} "
        "| {extra[remote]}:{extra[path]} "
        "| {level: <8} | {name}:{line} | {message}",
    )
