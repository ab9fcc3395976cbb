"""
Centralized Error Handling and Logging System
Every failure becomes a JSON error response; no single request can take the server down.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime
from typing import Any, Dict, Optional, Union
from contextvars import ContextVar

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

# Context variables for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
endpoint_context_var: ContextVar[str] = ContextVar('endpoint_context', default='')

logger = logging.getLogger(__name__)

class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    # Security settings
    SANITIZE_SENSITIVE_FIELDS = True
    SENSITIVE_FIELD_PATTERNS = [
        'password', 'token', 'key', 'secret', 'authorization',
        'auth', 'bearer', 'credential', 'cookie'
    ]

    # Logging settings
    LOG_REQUEST_BODIES = True
    LOG_HEADERS = True
    MAX_BODY_LOG_SIZE = 5000  # Truncate large bodies

    # Error response settings
    INCLUDE_TRACE_ID = True
    INCLUDE_TIMESTAMP = True

    # Malformed input is a client error; FastAPI's default would be 422
    VALIDATION_STATUS_CODE = 400

    @classmethod
    def is_sensitive_field(cls, field_name: str) -> bool:
        """Check if a field contains sensitive data"""
        field_lower = field_name.lower()
        return any(pattern in field_lower for pattern in cls.SENSITIVE_FIELD_PATTERNS)

    @classmethod
    def sanitize_data(cls, data: Union[Dict, str, Any]) -> Any:
        """Recursively sanitize sensitive data from logs"""
        if not cls.SANITIZE_SENSITIVE_FIELDS:
            return data

        if isinstance(data, dict):
            return {
                key: "***REDACTED***" if cls.is_sensitive_field(key) else cls.sanitize_data(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.sanitize_data(item) for item in data]
        elif isinstance(data, str) and len(data) > cls.MAX_BODY_LOG_SIZE:
            return data[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        else:
            return data

class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log structured error with full context, returning its trace ID"""

        # Reuse the request's trace ID so the log entry matches the X-Trace-ID header
        trace_id = getattr(request.state, 'trace_id', None) if request else None
        if not trace_id:
            trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            headers = dict(request.headers)
            log_entry["request"] = {
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "headers": ErrorHandlingConfig.sanitize_data(headers) if ErrorHandlingConfig.LOG_HEADERS else {},
                "client_ip": request.client.host if request.client else None,
                "user_agent": headers.get("user-agent", "unknown")
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
                "module": getattr(exception, '__module__', 'unknown')
            }

            if include_traceback:
                log_entry["exception"]["traceback"] = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )

        if extra_context:
            log_entry["context"] = ErrorHandlingConfig.sanitize_data(extra_context)

        endpoint_context = endpoint_context_var.get('')
        if endpoint_context:
            log_entry["endpoint_context"] = endpoint_context

        logger.error(json.dumps(log_entry, indent=2, default=str))

        return trace_id

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to capture request context and add request IDs"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        endpoint_context_var.set('')

        # Store request body for potential error logging
        body = None
        if ErrorHandlingConfig.LOG_REQUEST_BODIES:
            try:
                body = await request.body()
            except Exception as e:
                StructuredLogger.log_error(
                    "middleware_error",
                    "Failed to capture request body",
                    request=request,
                    exception=e,
                    include_traceback=False
                )

        request.state.captured_body = body
        request.state.trace_id = trace_id

        try:
            response = await call_next(request)
            # Add trace ID to response headers for client-side debugging
            response.headers["X-Trace-ID"] = trace_id
            return response
        except Exception as e:
            StructuredLogger.log_error(
                "unhandled_exception",
                f"Unhandled exception in request processing: {str(e)}",
                request=request,
                exception=e,
                extra_context={"body": _captured_body(request)}
            )
            raise

def _captured_body(request: Request) -> Optional[str]:
    """Decode the body captured by the middleware, if any"""
    body = getattr(request.state, 'captured_body', None)
    if not body:
        return None
    try:
        return ErrorHandlingConfig.sanitize_data(body.decode('utf-8'))
    except UnicodeDecodeError:
        return "DECODE_ERROR"

def _loggable_input(value: Any) -> Any:
    """Raw bodies arrive as bytes for non-JSON content types and may not be valid UTF-8"""
    if isinstance(value, (bytes, bytearray)):
        return ErrorHandlingConfig.sanitize_data(bytes(value).decode("utf-8", errors="replace"))
    return value

def _error_response(status_code: int, content: Dict[str, Any], trace_id: Optional[str]) -> JSONResponse:
    if ErrorHandlingConfig.INCLUDE_TRACE_ID and trace_id:
        content["trace_id"] = trace_id

    if ErrorHandlingConfig.INCLUDE_TIMESTAMP:
        content["timestamp"] = datetime.utcnow().isoformat()

    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))

# Global Exception Handlers
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with logging"""

    trace_id = None
    if exc.status_code >= 500 or ErrorHandlingConfig.LOG_REQUEST_BODIES:
        trace_id = StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            exception=exc,
            extra_context={
                "status_code": exc.status_code,
                "request_body": _captured_body(request)
            },
            include_traceback=exc.status_code >= 500
        )

    response = _error_response(
        exc.status_code,
        {
            "error": f"HTTP {exc.status_code}",
            "message": exc.detail,
        },
        trace_id
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed JSON, uncoercible fields and non-numeric path IDs"""

    validation_details = []
    for error in exc.errors():
        validation_details.append({
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown"),
            "input": _loggable_input(error.get("input", "not_provided"))
        })

    trace_id = StructuredLogger.log_error(
        "validation_error",
        f"Request validation failed: {len(validation_details)} validation errors",
        request=request,
        exception=exc,
        extra_context={
            "validation_errors": validation_details,
            "request_body": _captured_body(request)
        },
        include_traceback=False
    )

    return _error_response(
        ErrorHandlingConfig.VALIDATION_STATUS_CODE,
        {
            "error": "Validation Error",
            "message": "Request validation failed",
            "detail": validation_details,
            "error_count": len(validation_details)
        },
        trace_id
    )

async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions"""

    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc,
        extra_context={"request_body": _captured_body(request)},
        include_traceback=True
    )

    # Build safe response (don't expose internal details)
    return _error_response(
        500,
        {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
        },
        trace_id
    )

def setup_error_handling(app):
    """Setup error handling for FastAPI app"""

    app.add_middleware(RequestContextMiddleware)

    # Most specific first
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling system initialized")

# Utility for endpoint-specific logging
def set_endpoint_context(context: str):
    """Set context for current endpoint (call at start of endpoint functions)"""
    endpoint_context_var.set(context)
