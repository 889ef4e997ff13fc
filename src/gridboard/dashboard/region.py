"""
Region resolution and console links for dashboards.

Resolving the region is the first phase of building a dashboard: it
may consult the AWS configuration through boto3, while layout itself
only ever sees the resolved string.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

logger = logging.getLogger(__name__)


class RegionResolutionError(Exception):
    """Raised when no AWS region can be determined."""


def resolve_region(region: str | None = None, session: Any | None = None) -> str:
    """
    Determine the region a dashboard belongs to.

    Args:
        region: Explicit region; returned as-is when set
        session: boto3 Session to read the configured region from
            (default: a new Session using the standard AWS config chain)

    Returns:
        Region name

    Raises:
        RegionResolutionError: No explicit region and none configured
    """
    if region:
        return region

    if session is None:
        import boto3

        session = boto3.session.Session()

    resolved = session.region_name
    if not resolved:
        raise RegionResolutionError(
            "No region given and none configured; set AWS_REGION or "
            "pass a region explicitly"
        )

    logger.debug("Resolved dashboard region from AWS configuration: %s", resolved)
    return resolved


def dashboard_url(name: str, region: str) -> str:
    """Return the CloudWatch console URL of a dashboard."""
    return (
        f"https://{region}.console.aws.amazon.com/cloudwatch/home"
        f"?region={region}#dashboards:name={quote(name, safe='')}"
    )
