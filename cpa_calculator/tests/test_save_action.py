"""
Tests for the save-to-history action.

Covers the request payload, the success and failure notifications, and the
in-flight guard against duplicate submissions from one control.
"""

import asyncio
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping

import httpx
import pytest

from cpa_calculator.client.api_client import ApiError
from cpa_calculator.client.local_storage import MemoryLocalStorage
from cpa_calculator.client.notifications import NotificationCenter
from cpa_calculator.client.save_action import (
    SAVED_NOTIFICATION,
    SaveToHistoryAction,
    build_save_payload,
)
from cpa_calculator.client.state_store import CalculatorStateStore
from cpa_calculator.models.enums import CalculatorField, NotificationVariant
from cpa_calculator.models.schemas import CalculationResponse, CalculatorState


class RecordingClient:
    """Stands in for CalculationsClient; optionally blocks until released."""

    def __init__(self, error: Exception = None) -> None:
        self.payloads: List[Dict[str, Any]] = []
        self.release = asyncio.Event()
        self.release.set()
        self.error = error

    async def create_calculation(self, calculation: Mapping[str, Any]) -> CalculationResponse:
        self.payloads.append(dict(calculation))
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return CalculationResponse(
            id=len(self.payloads),
            lifetimeProfit=Decimal(calculation["lifetimeProfit"]),
            acquisitionBudgetPct=Decimal(calculation["acquisitionBudgetPct"]),
            conversionRatePct=Decimal(calculation["conversionRatePct"]),
            createdAt=datetime.now(),
        )


@pytest.fixture
def store(local_storage: MemoryLocalStorage) -> CalculatorStateStore:
    store = CalculatorStateStore(local_storage)
    store.initialize()
    return store


class TestPayload:

    def test_defaults_as_decimal_text(self) -> None:
        assert build_save_payload(CalculatorState()) == {
            "lifetimeProfit": "5000",
            "acquisitionBudgetPct": "50",
            "conversionRatePct": "10",
        }

    def test_fractional_values(self) -> None:
        state = CalculatorState(lifetimeProfit=1999.99, acquisitionBudgetPct=12.5, conversionRatePct=0.5)

        assert build_save_payload(state) == {
            "lifetimeProfit": "1999.99",
            "acquisitionBudgetPct": "12.5",
            "conversionRatePct": "0.5",
        }

    def test_currency_is_not_sent(self) -> None:
        assert "currency" not in build_save_payload(CalculatorState(currency="$"))


@pytest.mark.asyncio
class TestTrigger:

    async def test_success_saves_current_state_and_notifies(
        self,
        store: CalculatorStateStore,
        notifications: NotificationCenter,
    ) -> None:
        client = RecordingClient()
        action = SaveToHistoryAction(store, client, notify=notifications)
        store.update_field(CalculatorField.LIFETIME_PROFIT, 7200)

        created = await action.trigger()

        assert client.payloads == [
            {"lifetimeProfit": "7200", "acquisitionBudgetPct": "50", "conversionRatePct": "10"}
        ]
        assert created.lifetimeProfit == Decimal("7200")
        assert action.last_result == created
        assert notifications.drain() == [SAVED_NOTIFICATION]
        assert not action.is_pending

    async def test_second_trigger_while_pending_is_ignored(self, store: CalculatorStateStore) -> None:
        client = RecordingClient()
        client.release.clear()
        action = SaveToHistoryAction(store, client)

        first = asyncio.create_task(action.trigger())
        await asyncio.sleep(0)

        assert action.is_pending
        assert action.label == "Saving..."
        assert await action.trigger() is None

        client.release.set()
        created = await first

        assert created.id == 1
        assert len(client.payloads) == 1
        assert not action.is_pending
        assert action.label == "Save Result"

    async def test_sequential_triggers_are_not_deduplicated(self, store: CalculatorStateStore) -> None:
        client = RecordingClient()
        action = SaveToHistoryAction(store, client)

        first = await action.trigger()
        second = await action.trigger()

        assert first.id != second.id
        assert len(client.payloads) == 2

    async def test_api_error_clears_pending_and_notifies(
        self,
        store: CalculatorStateStore,
        notifications: NotificationCenter,
    ) -> None:
        error = ApiError(400, "Field required", "lifetimeProfit")
        action = SaveToHistoryAction(store, RecordingClient(error=error), notify=notifications)

        with pytest.raises(ApiError):
            await action.trigger()

        assert not action.is_pending
        assert action.last_error is error
        (shown,) = notifications.drain()
        assert shown.title == "Save failed"
        assert shown.variant is NotificationVariant.DESTRUCTIVE

    async def test_transport_error_propagates(self, store: CalculatorStateStore) -> None:
        error = httpx.ConnectError("connection refused")
        action = SaveToHistoryAction(store, RecordingClient(error=error))

        with pytest.raises(httpx.ConnectError):
            await action.trigger()

        assert not action.is_pending

    async def test_retry_after_failure_succeeds(
        self,
        store: CalculatorStateStore,
        notifications: NotificationCenter,
    ) -> None:
        client = RecordingClient(error=httpx.ReadTimeout("timed out"))
        action = SaveToHistoryAction(store, client, notify=notifications)

        with pytest.raises(httpx.ReadTimeout):
            await action.trigger()

        client.error = None
        created = await action.trigger()

        assert created is not None
        assert action.last_error is None
        assert notifications.drain()[-1] == SAVED_NOTIFICATION
