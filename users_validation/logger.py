"""
Structured logging utility for request validation.

This module provides a logger that writes one JSON line per validation
lifecycle event, tagged with a correlation ID, and feeds the CloudWatch
metrics client.

Follows steering rules:
- Log validation lifecycle with correlation ID
- Log errors with context (no sensitive data)
- Use consistent log format

Request values are never logged, only field names and error details.
"""

import json
import time
from typing import Dict, Any, Optional
from datetime import datetime, timezone

from ulid import ULID

from .metrics import MetricsClient, create_metrics_client


# Sensitive field names that should never be logged (compared lowercased)
SENSITIVE_FIELDS = {
    'password',
    'newpassword',
    'token',
    'secret',
    'apikey',
    'api_key',
    'authorization',
    'auth',
    'credentials',
    'privatekey',
    'private_key',
    'accesstoken',
    'access_token',
    'refreshtoken',
    'refresh_token',
    'sessionid',
    'session_id'
}


class StructuredLogger:
    """
    Structured logger for validation calls.

    Usage:
        logger = StructuredLogger(correlation_id='abc-123', operation='createUser')
        logger.log_validation_start(fields=['firstName', 'email'])
        # ... validate ...
        logger.log_validation_passed()
        logger.publish_metrics()
    """

    def __init__(self, correlation_id: str, operation: str, metrics: Optional[MetricsClient] = None):
        """
        Initialize the structured logger.

        Args:
            correlation_id: Unique identifier for request tracing
            operation: Validated operation name (e.g., 'createUser')
            metrics: Metrics client, a disabled one is created when omitted
        """
        self.correlation_id = correlation_id
        self.operation = operation
        self.start_time = time.time()
        self.metrics = metrics or create_metrics_client(operation, enabled=False)

    def _sanitize_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact sensitive fields from log data."""
        if not isinstance(data, dict):
            return data

        sanitized = {}
        for key, value in data.items():
            if str(key).lower() in SENSITIVE_FIELDS:
                sanitized[key] = '[REDACTED]'
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_data(value)
            elif isinstance(value, list):
                sanitized[key] = [
                    self._sanitize_data(item) if isinstance(item, dict) else item
                    for item in value
                ]
            else:
                sanitized[key] = value

        return sanitized

    def _latency_ms(self) -> int:
        return int((time.time() - self.start_time) * 1000)

    def _log(self, event: str, **kwargs: Any) -> None:
        log_entry = {
            'timestamp': datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + 'Z',
            'correlationId': self.correlation_id,
            'operation': self.operation,
            'event': event,
            **self._sanitize_data(kwargs)
        }

        # Use print for CloudWatch Logs
        print(json.dumps(log_entry, default=str))

    def log_validation_start(self, fields: Any, **additional_fields: Any) -> None:
        """
        Log validation start event with the names of the fields sent.

        Args:
            fields: Field names present in the request
            **additional_fields: Additional fields to include in log
        """
        self._log(
            'validation_start',
            fields=sorted(str(field) for field in fields),
            **additional_fields
        )

    def log_validation_passed(self, **additional_fields: Any) -> None:
        """
        Log a request that passed validation.

        Also emits metrics for validation count and latency.
        """
        latency_ms = self._latency_ms()

        self._log(
            'validation_passed',
            latencyMs=latency_ms,
            **additional_fields
        )

        self.metrics.emit_validation_count()
        self.metrics.emit_latency(latency_ms)

    def log_validation_error(
        self,
        error_code: str,
        error_message: str,
        **additional_fields: Any
    ) -> None:
        """
        Log a rejected request.

        Also emits metrics for validation count, rejection and latency.

        Example:
            logger.log_validation_error(
                error_code='FIRST_NAME_MISSING',
                error_message='First name is mandatory.'
            )
        """
        latency_ms = self._latency_ms()

        self._log(
            'validation_error',
            errorCode=error_code,
            errorMessage=error_message,
            latencyMs=latency_ms,
            **additional_fields
        )

        self.metrics.emit_validation_count()
        self.metrics.emit_rejection(error_code=error_code)
        self.metrics.emit_latency(latency_ms)

    def log_info(self, message: str, **additional_fields: Any) -> None:
        self._log(
            'info',
            message=message,
            **additional_fields
        )

    def publish_metrics(self) -> None:
        self.metrics.publish()


def create_logger(
    operation: str,
    correlation_id: Optional[str] = None,
    metrics: Optional[MetricsClient] = None
) -> StructuredLogger:
    """
    Create a structured logger for one validation call.

    A new ULID is used as correlation ID when the caller does not pass one.

    Args:
        operation: Validated operation name
        correlation_id: Caller's request ID (optional)
        metrics: Metrics client (optional)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(correlation_id or str(ULID()), operation, metrics=metrics)
