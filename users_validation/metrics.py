"""
CloudWatch metrics utility for request validation.

This module emits custom CloudWatch metrics for validation count, rejection
count and latency, one batch per validated request.

Follows steering rules:
- Explicit over implicit
- Fail fast on invalid input
- No global mutable state
"""

import boto3
from typing import Dict, Any, Optional, List
from datetime import datetime, timezone


# Default metric namespace for all user management metrics
METRIC_NAMESPACE = 'UserManagement'

# CloudWatch PutMetricData limit is 20 metrics per request
BATCH_SIZE = 20


class MetricsClient:
    """
    CloudWatch metrics client for validation pipelines.

    When disabled no boto3 client is created and published batches are
    discarded, so local runs and tests need no AWS configuration.

    Usage:
        metrics = MetricsClient(operation='createUser')
        metrics.emit_validation_count()
        metrics.emit_latency(latency_ms=3)
        metrics.emit_rejection(error_code='FIRST_NAME_MISSING')
        metrics.publish()
    """

    def __init__(self, operation: str, namespace: str = METRIC_NAMESPACE, enabled: bool = True):
        """
        Initialize the metrics client.

        Args:
            operation: Validated operation name (e.g., 'createUser')
            namespace: CloudWatch namespace
            enabled: Whether metrics are sent to CloudWatch
        """
        if not operation or not operation.strip():
            raise ValueError('Operation name is required for metrics')

        self.operation = operation
        self.namespace = namespace
        self.cloudwatch = boto3.client('cloudwatch') if enabled else None
        self._metric_data: List[Dict[str, Any]] = []

    @property
    def pending(self) -> List[Dict[str, Any]]:
        return list(self._metric_data)

    def _add_metric(
        self,
        metric_name: str,
        value: float,
        unit: str,
        dimensions: Optional[List[Dict[str, str]]] = None
    ) -> None:
        all_dimensions = [
            {
                'Name': 'Operation',
                'Value': self.operation
            }
        ]
        if dimensions:
            all_dimensions.extend(dimensions)

        self._metric_data.append({
            'MetricName': metric_name,
            'Value': value,
            'Unit': unit,
            'Timestamp': datetime.now(timezone.utc),
            'Dimensions': all_dimensions
        })

    def emit_validation_count(self, count: int = 1) -> None:
        """Count validated requests, accepted or rejected."""
        self._add_metric(
            metric_name='ValidationCount',
            value=float(count),
            unit='Count'
        )

    def emit_rejection(self, error_code: Optional[str] = None) -> None:
        """
        Count a rejected request.

        Args:
            error_code: Catalog code of the violation (optional), added as
                an ErrorCode dimension
        """
        dimensions = []
        if error_code:
            dimensions.append({
                'Name': 'ErrorCode',
                'Value': error_code
            })

        self._add_metric(
            metric_name='RejectionCount',
            value=1.0,
            unit='Count',
            dimensions=dimensions if dimensions else None
        )

    def emit_latency(self, latency_ms: int) -> None:
        if latency_ms < 0:
            raise ValueError('Latency must be non-negative')

        self._add_metric(
            metric_name='Latency',
            value=float(latency_ms),
            unit='Milliseconds'
        )

    def publish(self) -> None:
        """
        Publish all accumulated metrics to CloudWatch.

        Metrics are sent in batches of BATCH_SIZE. Publishing never fails the
        validation call: errors are printed and the batch is dropped.
        """
        if not self._metric_data:
            return

        if self.cloudwatch is None:
            self._metric_data = []
            return

        try:
            for i in range(0, len(self._metric_data), BATCH_SIZE):
                batch = self._metric_data[i:i + BATCH_SIZE]

                self.cloudwatch.put_metric_data(
                    Namespace=self.namespace,
                    MetricData=batch
                )
        except Exception as error:
            # Metrics are not critical to the validation outcome
            print(f'Failed to publish metrics: {error}')
        finally:
            self._metric_data = []


def create_metrics_client(
    operation: str,
    namespace: str = METRIC_NAMESPACE,
    enabled: bool = True
) -> MetricsClient:
    """
    Create a metrics client for a validated operation.

    Example:
        metrics = create_metrics_client('updateUser', enabled=False)
        metrics.emit_validation_count()
        metrics.publish()
    """
    return MetricsClient(operation, namespace=namespace, enabled=enabled)
