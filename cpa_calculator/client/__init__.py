"""
Python client for the Target CPA Calculator.

- local_storage: key/value snapshot storage (memory or JSON file)
- state_store: calculator state container mirrored to local storage
- view: display-ready rendering of the calculator screen
- api_client: async httpx client for /api/calculations
- save_action: "Save Result" with in-flight guard and notifications
- notifications: user-facing toasts
"""

from cpa_calculator.client.local_storage import (
    LocalStorage,
    MemoryLocalStorage,
    JsonFileLocalStorage,
)
from cpa_calculator.client.notifications import (
    Notification,
    NotificationCenter,
    Notifier,
)
from cpa_calculator.client.state_store import (
    CalculatorStateStore,
    STORAGE_KEY,
    serialize_state,
    deserialize_state,
)
from cpa_calculator.client.view import (
    SLIDERS,
    CalculatorView,
    build_view,
)
from cpa_calculator.client.api_client import (
    ApiError,
    CalculationsClient,
)
from cpa_calculator.client.save_action import (
    SaveToHistoryAction,
    build_save_payload,
)

__all__ = [
    'LocalStorage',
    'MemoryLocalStorage',
    'JsonFileLocalStorage',
    'Notification',
    'NotificationCenter',
    'Notifier',
    'CalculatorStateStore',
    'STORAGE_KEY',
    'serialize_state',
    'deserialize_state',
    'SLIDERS',
    'CalculatorView',
    'build_view',
    'ApiError',
    'CalculationsClient',
    'SaveToHistoryAction',
    'build_save_payload',
]
