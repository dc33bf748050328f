"""
"Save Result" action: store the current inputs in the backend history.

Only ever triggered explicitly. The action is pending from the moment it
fires until the request settles; a trigger while pending is ignored, which
keeps one control from submitting twice. Separate triggers are not
deduplicated: each successful save creates a new record.

On failure the pending flag is cleared, the error is kept on last_error,
the user gets a "Save failed" notification, and the error is re-raised.
"""

import logging
from typing import Dict, Optional

import httpx

from cpa_calculator.client.api_client import ApiError, CalculationsClient
from cpa_calculator.client.notifications import Notification, Notifier, discard_notification
from cpa_calculator.client.state_store import CalculatorStateStore
from cpa_calculator.models.enums import NotificationVariant
from cpa_calculator.models.schemas import CalculationResponse, CalculatorState
from cpa_calculator.services.formatting import to_decimal_text


logger = logging.getLogger(__name__)

SAVED_NOTIFICATION = Notification(
    title="Saved!",
    description="Calculation saved to history.",
)


def build_save_payload(state: CalculatorState) -> Dict[str, str]:
    """The create request body: the three inputs as decimal text."""
    return {
        "lifetimeProfit": to_decimal_text(state.lifetimeProfit),
        "acquisitionBudgetPct": to_decimal_text(state.acquisitionBudgetPct),
        "conversionRatePct": to_decimal_text(state.conversionRatePct),
    }


class SaveToHistoryAction:
    def __init__(
        self,
        store: CalculatorStateStore,
        client: CalculationsClient,
        notify: Notifier = discard_notification,
    ) -> None:
        self._store = store
        self._client = client
        self._notify = notify
        self._pending = False
        self.last_result: Optional[CalculationResponse] = None
        self.last_error: Optional[Exception] = None

    @property
    def is_pending(self) -> bool:
        """True while a save request is in flight; the control shows as disabled."""
        return self._pending

    @property
    def label(self) -> str:
        return "Saving..." if self._pending else "Save Result"

    async def trigger(self) -> Optional[CalculationResponse]:
        """
        Save the store's current inputs.

        Returns:
            The stored record, or None if a save was already in flight.

        Raises:
            ApiError: If the server rejected the request.
            httpx.HTTPError: If the request could not be completed.
        """
        if self._pending:
            logger.debug("Save ignored: request already in flight")
            return None

        # Set before the first await so a concurrent trigger sees it
        self._pending = True
        payload = build_save_payload(self._store.state)
        try:
            created = await self._client.create_calculation(payload)
        except (ApiError, httpx.HTTPError) as e:
            self.last_error = e
            self._notify(Notification(
                title="Save failed",
                description=str(e) or e.__class__.__name__,
                variant=NotificationVariant.DESTRUCTIVE,
            ))
            raise
        finally:
            self._pending = False

        self.last_error = None
        self.last_result = created
        self._notify(SAVED_NOTIFICATION)
        return created
