import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, RateService, TimeSeriesService
from config.settings import Settings, get_settings
from infrastructure.cache.base import CacheStore
from infrastructure.cache.factory import connect_cache_store
from infrastructure.providers import ExchangeRateProvider, OpenERAPIProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	cache: CacheStore | None = None
	provider: ExchangeRateProvider | None = None
	rate_service: RateService | None = None


deps = AppDependencies()


def build_provider(settings: Settings) -> ExchangeRateProvider | None:
	if not settings.OPEN_ER_API_URL:
		logger.warning('OPEN_ER_API_URL is empty, no exchange rate provider configured')
		return None

	return OpenERAPIProvider(
		base_url=settings.OPEN_ER_API_URL,
		name=settings.OPEN_ER_API_NAME,
		timeout=settings.OPEN_ER_API_TIMEOUT,
		health_check_timeout=settings.HEALTH_CHECK_TIMEOUT,
	)


async def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.cache = await connect_cache_store(settings.REDIS_URL, settings.REDIS_CONNECT_TIMEOUT)
	deps.provider = build_provider(settings)
	deps.rate_service = RateService(
		cache=deps.cache,
		provider=deps.provider,
		ttl=settings.cache_ttl(),
		logger=logging.getLogger('application.services.rate_service'),
	)
	logger.info(f'Dependencies initialized (cache backend: {deps.cache.name})')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.cache is not None:
		await deps.cache.close()
	if deps.provider is not None:
		await deps.provider.close()

	deps.cache = None
	deps.provider = None
	deps.rate_service = None
	logger.info('Cleanup complete')


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service)


def get_timeseries_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> TimeSeriesService:
	return TimeSeriesService(rate_service=rate_service, max_days=settings.MAX_TIMESERIES_DAYS)
