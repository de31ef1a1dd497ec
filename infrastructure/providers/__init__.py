from .base import ExchangeRateProvider
from .openerapi import OpenERAPIProvider

__all__ = ['ExchangeRateProvider', 'OpenERAPIProvider']
