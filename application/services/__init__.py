from .conversion_service import ConversionService
from .rate_service import RateService
from .timeseries_service import TimeSeriesService

__all__ = ['ConversionService', 'RateService', 'TimeSeriesService']
