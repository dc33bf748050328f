"""
Client-side state container for the calculator.

CalculatorStateStore owns the current CalculatorState and mirrors it to an
injected LocalStorage under a fixed key:

- initialize() seeds the state from the stored snapshot, or the defaults
  when nothing usable is stored (a bad snapshot is logged, never raised)
- every later mutation rewrites the snapshot synchronously, before the
  mutating call returns
- derived metrics are recomputed from the current state on every read

Nothing is written to storage before initialize() runs.
"""

import logging
from typing import Optional, Union

from pydantic import ValidationError

from cpa_calculator.client.local_storage import JsonFileLocalStorage, LocalStorage
from cpa_calculator.client.notifications import Notification, Notifier, discard_notification
from cpa_calculator.models.enums import CalculatorField, Currency, resolve_currency
from cpa_calculator.models.schemas import DEFAULT_STATE, CalculatorState
from cpa_calculator.services.derivation import DerivedMetrics, derive_metrics


logger = logging.getLogger(__name__)

STORAGE_KEY: str = "ppc-calculator-state"

RESET_NOTIFICATION = Notification(
    title="Reset to defaults",
    description="All values have been restored to their initial state.",
)


def serialize_state(state: CalculatorState) -> str:
    return state.model_dump_json()


def deserialize_state(raw: str) -> CalculatorState:
    """
    Parse a stored snapshot.

    Missing fields take their default values.

    Raises:
        pydantic.ValidationError: If the text is not JSON or not a valid
            snapshot object.
    """
    return CalculatorState.model_validate_json(raw)


class CalculatorStateStore:
    """
    Holds calculator inputs and keeps local storage in sync with them.

    Args:
        storage: Where snapshots are read from and written to.
        notify: Receives user notifications (reset confirmation).
        key: Storage key of the snapshot.
    """

    def __init__(
        self,
        storage: LocalStorage,
        notify: Notifier = discard_notification,
        key: str = STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._notify = notify
        self._key = key
        self._state: CalculatorState = DEFAULT_STATE
        self._initialized = False

    @classmethod
    def from_settings(cls, notify: Notifier = discard_notification) -> "CalculatorStateStore":
        """Store backed by the JSON file named in Settings.state_file."""
        from cpa_calculator.core.config import get_settings

        return cls(JsonFileLocalStorage(get_settings().state_file), notify=notify)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> CalculatorState:
        """
        Load the persisted snapshot, falling back to the defaults.

        Returns:
            The state the store starts from.
        """
        raw = self._storage.get_item(self._key)
        if raw:
            try:
                self._state = deserialize_state(raw)
            except ValidationError as e:
                logger.error(f"Failed to parse saved state, using defaults: {e}")
                self._state = DEFAULT_STATE

        self._initialized = True
        self._persist()
        return self._state

    # =========================================================================
    # Reads
    # =========================================================================

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def currency(self) -> Currency:
        return resolve_currency(self._state.currency)

    @property
    def metrics(self) -> DerivedMetrics:
        return derive_metrics(
            self._state.lifetimeProfit,
            self._state.acquisitionBudgetPct,
            self._state.conversionRatePct,
        )

    # =========================================================================
    # Mutations
    # =========================================================================

    def update_field(self, field: Union[CalculatorField, str], value: float) -> CalculatorState:
        """
        Set one numeric input. Values are stored as given, without clamping.

        Raises:
            ValueError: If field is not one of the numeric inputs.
        """
        name = CalculatorField(field).value
        return self._set(self._state.model_copy(update={name: float(value)}))

    def set_currency(self, symbol: Optional[str]) -> CalculatorState:
        """Change the display currency; unknown symbols select the default."""
        return self._set(self._state.model_copy(update={"currency": resolve_currency(symbol).value}))

    def reset(self) -> CalculatorState:
        """Restore the default inputs and tell the user."""
        state = self._set(DEFAULT_STATE)
        self._notify(RESET_NOTIFICATION)
        return state

    def _set(self, state: CalculatorState) -> CalculatorState:
        self._state = state
        self._persist()
        return state

    def _persist(self) -> None:
        if self._initialized:
            self._storage.set_item(self._key, serialize_state(self._state))
