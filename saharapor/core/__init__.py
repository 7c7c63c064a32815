"""
Core services shared by the components
"""
from flask import current_app

from .activity_log import ActivityLogHandler, activity_log, install_activity_log
from .crew_store import CrewStore, empty_state

EXTENSION_KEY = 'saharapor'


def get_service(name):
    """Look up a service object attached to the running app"""
    return current_app.extensions[EXTENSION_KEY][name]


def get_crew_store() -> CrewStore:
    return get_service('crew_store')


__all__ = [
    'ActivityLogHandler',
    'activity_log',
    'install_activity_log',
    'CrewStore',
    'empty_state',
    'EXTENSION_KEY',
    'get_service',
    'get_crew_store',
]
