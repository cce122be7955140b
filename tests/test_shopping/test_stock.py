"""
Tests for stock notifications.

These tests verify that the Stock notifies its customers synchronously,
in registration order, with the stock status message.
"""

import pytest
from shopping.stock import Customer, Observer, Stock


class RecordingObserver(Observer):
    """Observer that remembers the messages it was sent."""

    def __init__(self):
        self.messages: list[str] = []

    def update(self, message: str) -> None:
        self.messages.append(message)


class TestCustomer:
    """Tests for the Customer observer."""

    def test_update_writes_prefixed_line(self, lines):
        """Test that a customer writes its name before the message."""
        customer = Customer("Ali", output=lines.append)

        customer.update("Merhaba")

        assert lines == ["Ali: Merhaba"]

    def test_update_prints_to_stdout_by_default(self, capsys):
        """Test that the default output is stdout."""
        Customer("Bora").update("Stok durumu değişti: Stok var.")

        captured = capsys.readouterr()
        assert captured.out == "Bora: Stok durumu değişti: Stok var.\n"

    def test_holds_only_its_name(self, lines):
        """Test that receiving messages leaves the customer unchanged."""
        customer = Customer("Ali", output=lines.append)
        before = dict(vars(customer))

        customer.update("first")
        customer.update("second")

        assert vars(customer) == before
        assert lines == ["Ali: first", "Ali: second"]


class TestObserver:
    """Tests for the Observer interface."""

    def test_update_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Observer().update("message")


class TestStock:
    """Tests for Stock notifications."""

    def test_status_initially_unset(self, stock: Stock):
        assert stock.status is None
        assert stock.get_observer_count() == 0

    def test_set_status_notifies_in_registration_order(self, stock: Stock, lines):
        """Test that every customer is notified once, in the order added."""
        for name in ["Ali", "Bora", "Cem"]:
            stock.add_observer(Customer(name, output=lines.append))

        notified = stock.set_stock_status("Stok var.")

        assert notified == 3
        assert lines == [
            "Ali: Stok durumu değişti: Stok var.",
            "Bora: Stok durumu değişti: Stok var.",
            "Cem: Stok durumu değişti: Stok var.",
        ]
        assert stock.status == "Stok var."

    def test_each_observer_gets_exactly_one_message(self, stock: Stock):
        ali = RecordingObserver()
        bora = RecordingObserver()
        stock.add_observer(ali)
        stock.add_observer(bora)

        stock.set_stock_status("Stok yok.")

        assert ali.messages == ["Stok durumu değişti: Stok yok."]
        assert bora.messages == ["Stok durumu değişti: Stok yok."]

    def test_duplicate_observer_notified_twice(self, stock: Stock, lines):
        """Test that registrations are not deduplicated."""
        ali = Customer("Ali", output=lines.append)
        stock.add_observer(ali)
        stock.add_observer(ali)

        notified = stock.set_stock_status("Stok var.")

        assert notified == 2
        assert lines == [
            "Ali: Stok durumu değişti: Stok var.",
            "Ali: Stok durumu değişti: Stok var.",
        ]

    def test_no_notification_without_status_change(self, stock: Stock, lines):
        """Test that adding observers alone does not notify anyone."""
        stock.add_observer(Customer("Ali", output=lines.append))

        assert lines == []

    def test_set_status_without_observers(self, stock: Stock):
        assert stock.set_stock_status("Stok var.") == 0
        assert stock.status == "Stok var."

    def test_each_status_change_notifies_again(self, stock: Stock, lines):
        stock.add_observer(Customer("Ali", output=lines.append))

        stock.set_stock_status("Stok var.")
        stock.set_stock_status("Stok yok.")

        assert lines == [
            "Ali: Stok durumu değişti: Stok var.",
            "Ali: Stok durumu değişti: Stok yok.",
        ]
        assert stock.status == "Stok yok."

    def test_remove_observer(self, stock: Stock, lines):
        ali = Customer("Ali", output=lines.append)
        bora = Customer("Bora", output=lines.append)
        stock.add_observer(ali)
        stock.add_observer(bora)

        assert stock.remove_observer(ali) is True
        stock.set_stock_status("Stok var.")

        assert lines == ["Bora: Stok durumu değişti: Stok var."]

    def test_remove_unknown_observer(self, stock: Stock):
        assert stock.remove_observer(Customer("Ali")) is False

    def test_observer_exception_propagates(self, stock: Stock):
        """Test that a failing observer is not silenced."""
        class BrokenObserver(Observer):
            def update(self, message):
                raise RuntimeError("broken")

        stock.add_observer(BrokenObserver())

        with pytest.raises(RuntimeError):
            stock.set_stock_status("Stok var.")

    def test_count_includes_observers_removed_during_notification(self, stock: Stock):
        """Test that observers leaving mid-notification are still counted."""
        class LeavingObserver(RecordingObserver):
            def update(self, message):
                super().update(message)
                stock.remove_observer(self)

        first = LeavingObserver()
        second = LeavingObserver()
        stock.add_observer(first)
        stock.add_observer(second)

        notified = stock.set_stock_status("Stok var.")

        assert notified == 2
        assert first.messages == ["Stok durumu değişti: Stok var."]
        assert second.messages == ["Stok durumu değişti: Stok var."]
        assert stock.get_observer_count() == 0
