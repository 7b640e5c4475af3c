"""Structured logging and observability for the evaluator service."""

import logging
import time
from typing import Optional, Dict, Any
from functools import wraps

# Expressions longer than this are clipped in log records
MAX_LOGGED_EXPRESSION_LENGTH = 200

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Cache for EvaluationLogger instances to avoid recreating them
_logger_cache: Dict[str, "EvaluationLogger"] = {}


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging only if not already configured.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG"
    """
    if not logging.root.handlers:
        logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


class EvaluationLogger:
    """
    Structured logging for expression evaluation requests.

    Provides methods to log requests, results and errors with consistent
    structured data for observability.

    Example:
        >>> logger = EvaluationLogger("api")
        >>> logger.log_request(expression="3+5*2")
    """

    def __init__(self, component: str):
        """
        Initialize an EvaluationLogger instance.

        Args:
            component: Name of the component using this logger (e.g., "api", "cli")
        """
        self.component = component
        self.logger = logging.getLogger(component)

    def log_request(self, expression: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an incoming evaluation request.

        Args:
            expression: The expression to be evaluated
            metadata: Optional dictionary of additional metadata to include in the log
        """
        self.logger.info(
            "Evaluation requested",
            extra={
                "component": self.component,
                "expression": truncate_for_logging(expression),
                "expression_length": len(expression),
                "metadata": metadata or {},
            },
        )

    def log_result(self, result: str, processing_time_ms: float, success: bool) -> None:
        """
        Log an evaluation result.

        Args:
            result: The rendered result string
            processing_time_ms: Time taken to evaluate in milliseconds
            success: Whether the expression produced a number
        """
        self.logger.info(
            "Evaluation completed",
            extra={
                "component": self.component,
                "result": result,
                "processing_time_ms": processing_time_ms,
                "success": success,
            },
        )

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an error with full exception information.

        Args:
            error: The exception that was raised
            context: Optional dictionary of additional context information
        """
        self.logger.error(
            f"Error: {str(error)}",
            extra={
                "component": self.component,
                "error_type": type(error).__name__,
                "context": context or {},
            },
            exc_info=True,
        )


def get_logger(component: str) -> EvaluationLogger:
    """Get a cached EvaluationLogger for the component."""
    if component not in _logger_cache:
        _logger_cache[component] = EvaluationLogger(component)
    return _logger_cache[component]


def truncate_for_logging(text: str, max_length: int = MAX_LOGGED_EXPRESSION_LENGTH) -> str:
    """
    Clip long text for log records.

    Args:
        text: Text to clip
        max_length: Maximum number of characters kept

    Returns:
        The text unchanged if short enough, otherwise its prefix followed by
        a marker with the original length

    Example:
        >>> truncate_for_logging("1+" * 200, max_length=10)
        '1+1+1+1+1+...<400_chars>'
    """
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}...<{len(text)}_chars>"


def track_latency(component: str):
    """
    Decorator to track function execution latency and log results.

    Logs both successful completions and errors with latency information.
    Logger instances are cached by component name.

    Args:
        component: Name of the component using this decorator (e.g., "api")

    Returns:
        A decorator function that wraps the target function with latency tracking.

    Example:
        >>> @track_latency("cli")
        ... def run(expression: str) -> str:
        ...     return evaluate(expression)
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(component)

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
                latency_ms = (time.perf_counter() - start_time) * 1000
                logger.logger.debug(
                    f"{func.__name__} completed", extra={"function": func.__name__, "latency_ms": latency_ms, "success": True}
                )
                return result
            except Exception as e:
                latency_ms = (time.perf_counter() - start_time) * 1000
                logger.log_error(e, context={"function": func.__name__, "latency_ms": latency_ms, "success": False})
                raise

        return wrapper

    return decorator
