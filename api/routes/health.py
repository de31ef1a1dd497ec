import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_rate_service
from api.schemas import HealthResponse
from application.services import RateService
from domain.models.health import OverallStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=['health'])


@router.get(
	'/health',
	response_model=HealthResponse,
	summary='System health check',
	description='Status of the cache and of each configured rate provider',
)
async def health_check(service: Annotated[RateService, Depends(get_rate_service)]):
	report = await service.health_report()

	body = HealthResponse(
		status=report.status.value,
		timestamp=report.timestamp,
		dependencies={name: status.value for name, status in report.dependencies.items()},
	)

	if report.status is OverallStatus.UNHEALTHY:
		logger.error(f'System health check: {report.status.value} {body.dependencies}')
		return JSONResponse(status_code=503, content=body.model_dump(mode='json'))

	if report.status is OverallStatus.DEGRADED:
		logger.warning(f'System health check: {report.status.value} {body.dependencies}')
	return body


@router.get(
	'/health/simple',
	summary='Simple health check',
	description='Returns 200 OK while the process is serving requests',
)
async def simple_health_check():
	return {'status': 'ok', 'timestamp': datetime.now(UTC).isoformat()}
