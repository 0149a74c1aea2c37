"""Tests for the interactive console and forms."""

import asyncio
from datetime import datetime

import pytest
import questionary

from pt_manager.clients.manual import ManualInputClient
from pt_manager.clients.manual.client import _positive_int, _required, _valid_date
from pt_manager.commands.console import ConsoleSession
from pt_manager.models.customer import Customer
from pt_manager.services.query import SortState


class FakePrompt:
    def __init__(self, answer):
        self.answer = answer

    async def ask_async(self):
        return self.answer


@pytest.fixture
def answer(monkeypatch):
    """Script the answers questionary prompts will return, in order."""

    def script(*answers):
        remaining = iter(answers)

        def prompt(*args, **kwargs):
            return FakePrompt(next(remaining))

        for name in ("select", "text", "confirm"):
            monkeypatch.setattr(questionary, name, prompt)

    return script


class StubClient(ManualInputClient):
    def __init__(self, customer=None):
        self.customer = customer

    async def collect_customer(self, existing=None):
        return self.customer


class TestConsoleSession:
    """Tests for ConsoleSession menus."""

    def test_delete_declined(self, state, answer):
        answer("Delete", "c1", False, "Back")
        asyncio.run(ConsoleSession(state).customers_menu())

        assert state.customers.get("c1") is not None

    def test_delete_confirmed(self, state, answer):
        answer("Delete", "c1", True, "Back")
        asyncio.run(ConsoleSession(state).customers_menu())

        assert state.customers.get("c1") is None
        assert state.trainings.get("t1") is not None

    def test_sort_toggles(self, state, answer):
        session = ConsoleSession(state)
        answer("Sort", "last_name", "Sort", "email", "Back")
        asyncio.run(session.customers_menu())

        assert session.customer_sort == SortState("email", True)

    def test_sort_same_column_reverses(self, state, answer):
        session = ConsoleSession(state)
        answer("Sort", "last_name", "Back")
        asyncio.run(session.customers_menu())

        assert session.customer_sort == SortState("last_name", False)

    def test_search_kept(self, state, answer):
        session = ConsoleSession(state)
        answer("Search", "yoga", "Back")
        asyncio.run(session.trainings_menu())

        assert session.training_search == "yoga"

    def test_add_customer(self, state, answer, sample_customer):
        answer("Add", "Back")
        asyncio.run(ConsoleSession(state, StubClient(sample_customer)).customers_menu())

        assert state.customers.get("c9") == sample_customer

    def test_add_invalid_customer_reported(self, state, answer, capsys):
        broken = Customer("c9", "Ann", "Lee", "", "555")
        answer("Add", "Back")
        asyncio.run(ConsoleSession(state, StubClient(broken)).customers_menu())

        assert state.customers.get("c9") is None
        assert "email" in capsys.readouterr().out

    def test_delete_training(self, state, answer):
        answer("Delete", "t2", True, "Back")
        asyncio.run(ConsoleSession(state).trainings_menu())

        assert state.trainings.get("t2") is None

    def test_main_menu_quit(self, state, answer):
        answer("Statistics", "Quit")
        asyncio.run(ConsoleSession(state).run())


class TestManualInputClient:
    """Tests for the interactive forms."""

    def test_collect_customer(self, answer):
        answer("Ann", "Lee", "ann@example.com", "555", " 9 Birch Way ", "")
        customer = asyncio.run(ManualInputClient().collect_customer())

        assert customer == Customer("", "Ann", "Lee", "ann@example.com", "555", "9 Birch Way", "")

    def test_edit_keeps_id(self, answer, state):
        answer("Johnny", "Doe", "j@example.com", "555", "", "")
        customer = asyncio.run(ManualInputClient().collect_customer(state.customers.get("c1")))

        assert customer.id == "c1"
        assert customer.first_name == "Johnny"

    def test_collect_customer_cancelled(self, answer):
        answer("Ann", None)
        assert asyncio.run(ManualInputClient().collect_customer()) is None

    def test_collect_training(self, answer, state):
        answer("2025-05-01T09:00", "Yoga", "45", "c2")
        training = asyncio.run(
            ManualInputClient().collect_training(list(state.customers.list_all()))
        )

        assert training.date == datetime(2025, 5, 1, 9, 0)
        assert training.activity == "Yoga"
        assert training.duration == 45
        assert training.customer_id == "c2"

    def test_collect_training_without_customers(self):
        assert asyncio.run(ManualInputClient().collect_training([])) is None

    def test_validators(self):
        assert _required("x") is True
        assert _required("  ") == "This field is required"
        assert _positive_int("30") is True
        assert _positive_int("0") == "Duration must be greater than zero"
        assert _positive_int("abc") == "Enter a whole number of minutes"
        assert _valid_date("2025-05-01T09:00") is True
        assert _valid_date("tomorrow") == "Use YYYY-MM-DDTHH:MM"
