from dataclasses import dataclass
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class CacheTTLConfig:
	"""TTL in seconds per volatility class."""

	latest_rate: int = 300
	historical_rate: int = 86400
	currency_list: int = 86400


class Settings(BaseSettings):
	REDIS_URL: str = 'redis://localhost:6379/0'
	REDIS_CONNECT_TIMEOUT: float = 5.0

	# Upstream provider
	OPEN_ER_API_NAME: str = 'open.er-api.com'
	OPEN_ER_API_URL: str = 'https://open.er-api.com/v6'
	OPEN_ER_API_TIMEOUT: float = 10.0
	HEALTH_CHECK_TIMEOUT: float = 5.0

	# Cache TTLs (seconds)
	LATEST_RATE_TTL: int = 300
	HISTORICAL_RATE_TTL: int = 86400
	CURRENCY_LIST_TTL: int = 86400

	MAX_TIMESERIES_DAYS: int = 366

	# Application
	APP_NAME: str = 'Exchange Rate Service'
	DEBUG: bool = False
	ALLOWED_ORIGINS: list[str] = ['*']

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False
	LOG_DIRECTORY: str | None = None

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@model_validator(mode='after')
	def check_ttl_ordering(self) -> 'Settings':
		if self.LATEST_RATE_TTL <= 0:
			raise ValueError('LATEST_RATE_TTL must be positive')
		if self.LATEST_RATE_TTL >= min(self.HISTORICAL_RATE_TTL, self.CURRENCY_LIST_TTL):
			raise ValueError(
				'LATEST_RATE_TTL must be shorter than HISTORICAL_RATE_TTL and CURRENCY_LIST_TTL'
			)
		return self

	def cache_ttl(self) -> CacheTTLConfig:
		return CacheTTLConfig(
			latest_rate=self.LATEST_RATE_TTL,
			historical_rate=self.HISTORICAL_RATE_TTL,
			currency_list=self.CURRENCY_LIST_TTL,
		)


@lru_cache
def get_settings() -> Settings:
	return Settings()
