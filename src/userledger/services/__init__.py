"""
Service layer for userledger.
"""

from .registration_service import RegistrationService
from .configuration_service import (
    ConfigurationService,
    LedgerConfig,
    StoreConfig,
    create_store,
)

__all__ = [
    'RegistrationService',
    'ConfigurationService',
    'LedgerConfig',
    'StoreConfig',
    'create_store',
]
