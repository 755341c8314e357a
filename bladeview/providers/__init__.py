"""
Service Providers
"""
from bladeview.providers.service_provider import ServiceProvider
from bladeview.providers.view_service_provider import ViewServiceProvider

__all__ = [
    'ServiceProvider',
    'ViewServiceProvider',
]
