"""
Expression Evaluator Service
HTTP API wrapping the arithmetic expression evaluator
"""

import logging
import time
from typing import Optional
from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse

from evaluator import ERROR, evaluate
from models import (
    EvaluateRequest,
    EvaluateResponse,
    BatchEvaluateRequest,
    BatchEvaluateResponse,
    HealthCheckResponse,
)
from observability import configure_logging, get_logger
from config.runtime import get_config

# Configuration
config = get_config()
config.load_env_file()
SERVICE_CONFIG = config.get_service_config()
SERVICE_NAME = SERVICE_CONFIG["service_name"]
SERVICE_VERSION = SERVICE_CONFIG["version"]
MAX_EXPRESSION_LENGTH = SERVICE_CONFIG["max_expression_length"]

# Configure logging
configure_logging(SERVICE_CONFIG["log_level"])
logger = logging.getLogger(__name__)
eval_logger = get_logger("api")

# Initialize FastAPI app
app = FastAPI(
    title="Expression Evaluator",
    description="Evaluates arithmetic expressions with precedence, powers and trigonometric functions",
    version=SERVICE_VERSION,
)


def _evaluate_one(expression: str) -> EvaluateResponse:
    """
    Evaluate one expression and wrap the outcome for the API.

    Args:
        expression: Expression text from the request

    Returns:
        EvaluateResponse whose ``result`` is exactly what ``evaluate`` returned

    Raises:
        HTTPException: 413 if the expression exceeds MAX_EXPRESSION_LENGTH
    """
    if len(expression) > MAX_EXPRESSION_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"Expression longer than {MAX_EXPRESSION_LENGTH} characters",
        )

    eval_logger.log_request(expression)
    start_time = time.perf_counter()
    result = evaluate(expression)
    processing_time_ms = (time.perf_counter() - start_time) * 1000
    success = result != ERROR
    eval_logger.log_result(result, processing_time_ms, success)

    return EvaluateResponse(
        expression=expression,
        result=result,
        success=success,
        processing_time_ms=processing_time_ms,
    )


@app.get("/ping", response_model=HealthCheckResponse)
async def health_check():
    """
    Health check endpoint.

    Returns:
        JSON response indicating service health
    """
    return HealthCheckResponse(status="healthy", service=SERVICE_NAME, version=SERVICE_VERSION)


@app.post("/api/evaluate", response_model=EvaluateResponse)
async def evaluate_expression(request: EvaluateRequest):
    """Evaluate a single expression."""
    return _evaluate_one(request.expression)


@app.post("/api/evaluate/batch", response_model=BatchEvaluateResponse)
async def evaluate_batch(request: BatchEvaluateRequest):
    """Evaluate several expressions independently, preserving order."""
    return BatchEvaluateResponse(results=[_evaluate_one(expression) for expression in request.expressions])


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return JSONResponse(
        content={
            "service": SERVICE_NAME,
            "description": "Arithmetic expression evaluator",
            "endpoints": {
                "health": "/ping",
                "evaluate": "/api/evaluate",
                "batch": "/api/evaluate/batch",
            },
            "operators": ["+", "-", "*", "/", "^"],
            "functions": ["sqrt", "sin", "cos", "tan"],
            "max_expression_length": MAX_EXPRESSION_LENGTH,
        }
    )


def main(host: Optional[str] = None, port: Optional[int] = None):
    """Start the evaluator HTTP server."""
    import uvicorn

    host = host or SERVICE_CONFIG["host"]
    port = port or SERVICE_CONFIG["port"]
    logger.info(f"Starting {SERVICE_NAME} on {host}:{port}")

    # Start server (BLOCKING - runs forever)
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=SERVICE_CONFIG["log_level"].lower(),
    )


if __name__ == "__main__":
    main()
