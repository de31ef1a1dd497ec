from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNCONFIGURED = "unconfigured"


class OverallStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


CACHE_DEPENDENCY = "cache"


@dataclass(frozen=True)
class HealthReport:
    status: OverallStatus
    dependencies: dict[str, HealthStatus]
    timestamp: datetime


def determine_overall_status(dependencies: dict[str, HealthStatus]) -> OverallStatus:
    """
    Compose the service status from per-dependency statuses.

    - healthy: every dependency is healthy
    - degraded: only the cache is down; rates are still served from the provider
    - unhealthy: a provider is down or unconfigured
    """
    has_degraded = False

    for name, status in dependencies.items():
        if status is HealthStatus.HEALTHY:
            continue
        if name == CACHE_DEPENDENCY:
            has_degraded = True
        else:
            return OverallStatus.UNHEALTHY

    return OverallStatus.DEGRADED if has_degraded else OverallStatus.HEALTHY
