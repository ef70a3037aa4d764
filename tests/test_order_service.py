"""Tests for the OrderService use cases."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from order_flow_api.app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from order_flow_api.app.models import Item, Order
from order_flow_api.app.schemas.order import ItemCreate, OrderInput
from order_flow_api.app.services.order_service import OrderService


def run(coro):
    return asyncio.run(coro)


def _input(info="Deliver after 5pm", customer_id=1, items=("Keyboard",)) -> OrderInput:
    return OrderInput(
        order_information=info,
        customer_id=customer_id,
        items=None if items is None else [ItemCreate(name=n) for n in items],
    )


def _break_commit(db, monkeypatch):
    def broken_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", broken_commit)


class TestListOrders:

    def test_defaults_to_first_page_newest_first(self, seed_orders):
        orders = run(OrderService.list_orders(seed_orders))
        assert [o.id for o in orders] == [2, 1]

    def test_orders_carry_customer_and_items(self, seed_orders):
        orders = run(OrderService.list_orders(seed_orders))
        oldest = orders[-1]
        assert oldest.customer.name == "John Doe"
        assert sorted(i.name for i in oldest.items) == ["Keyboard", "Mouse"]

    def test_page_size_bounds_result(self, seed_orders):
        assert len(run(OrderService.list_orders(seed_orders, page_index=1, page_size=1))) == 1

    def test_pages_are_disjoint(self, db):
        for n in range(5):
            run(OrderService.create_order(db, _input(info=f"Order {n}")))
        first = run(OrderService.list_orders(db, page_index=1, page_size=2))
        second = run(OrderService.list_orders(db, page_index=2, page_size=2))
        third = run(OrderService.list_orders(db, page_index=3, page_size=2))
        ids = [o.id for o in first + second + third]
        assert len(first) == 2 and len(second) == 2 and len(third) == 1
        assert len(set(ids)) == 5

    def test_page_past_the_end_is_empty(self, seed_orders):
        assert run(OrderService.list_orders(seed_orders, page_index=5, page_size=10)) == []

    @pytest.mark.parametrize("page_index, page_size", [(-1, 1), (1, 0), (0, None), (None, -3)])
    def test_non_positive_paging_rejected(self, db, page_index, page_size):
        with pytest.raises(ValidationError, match="Invalid page index or page size."):
            run(OrderService.list_orders(db, page_index=page_index, page_size=page_size))


class TestGetOrders:

    def test_get_by_id(self, seed_orders):
        order = run(OrderService.get_order(seed_orders, 1))
        assert order.customer_id == 1
        assert order.customer.email == "john@example.com"

    def test_get_unknown(self, db):
        with pytest.raises(NotFoundError, match="Order not found."):
            run(OrderService.get_order(db, 999))

    def test_by_customer_id(self, seed_orders):
        orders = run(OrderService.list_orders_by_customer_id(seed_orders, 1))
        assert len(orders) == 1
        assert orders[0].customer_id == 1

    def test_by_unknown_customer_id(self, seed_orders):
        with pytest.raises(NotFoundError, match="No orders found for the specified customer."):
            run(OrderService.list_orders_by_customer_id(seed_orders, 999))

    def test_by_customer_name(self, seed_orders):
        orders = run(OrderService.list_orders_by_customer_name(seed_orders, "Jane Smith"))
        assert [o.id for o in orders] == [2]

    def test_by_unknown_customer_name(self, seed_orders):
        with pytest.raises(NotFoundError, match="^Customer not found.$"):
            run(OrderService.list_orders_by_customer_name(seed_orders, "Nobody"))

    def test_by_name_requires_exact_match(self, seed_orders):
        with pytest.raises(NotFoundError, match="^Customer not found.$"):
            run(OrderService.list_orders_by_customer_name(seed_orders, "john doe"))

    def test_customer_without_orders(self, db):
        with pytest.raises(NotFoundError, match="No orders found for the specified customer."):
            run(OrderService.list_orders_by_customer_name(db, "John Doe"))


class TestCreateOrder:

    def test_creates_order_with_customer_and_items(self, db):
        order = run(OrderService.create_order(db, _input(items=("Keyboard", "Mouse"))))
        assert order.id is not None
        assert order.customer.name == "John Doe"
        assert [i.name for i in order.items] == ["Keyboard", "Mouse"]
        assert order.order_date is not None

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"info": ""}, "Order information is required."),
            ({"info": None}, "Order information is required."),
            ({"customer_id": 0}, "Invalid customer ID."),
            ({"customer_id": -4}, "Invalid customer ID."),
            ({"customer_id": None}, "Invalid customer ID."),
            ({"items": ()}, "At least one item is required for the order."),
            ({"items": None}, "At least one item is required for the order."),
            ({"items": ("Keyboard", "")}, "Item name is required."),
        ],
    )
    def test_validation_messages(self, db, kwargs, message):
        with pytest.raises(ValidationError, match=message):
            run(OrderService.create_order(db, _input(**kwargs)))
        assert db.query(Order).count() == 0

    def test_first_failing_check_wins(self, db):
        with pytest.raises(ValidationError, match="Order information is required."):
            run(OrderService.create_order(db, _input(info="", customer_id=0, items=())))

    def test_unknown_customer(self, db):
        with pytest.raises(NotFoundError, match="Customer with the provided ID not found."):
            run(OrderService.create_order(db, _input(customer_id=999)))
        assert db.query(Item).count() == 0

    def test_store_failure_becomes_persistence_error(self, db, monkeypatch):
        _break_commit(db, monkeypatch)
        with pytest.raises(PersistenceError, match="Failed to create the order.") as excinfo:
            run(OrderService.create_order(db, _input()))
        assert isinstance(excinfo.value.__cause__, OperationalError)
        assert db.query(Order).count() == 0


class TestUpdateOrder:

    def test_overwrites_fields_and_resets_date(self, seed_orders):
        db = seed_orders
        before = db.get(Order, 1).order_date
        message = run(OrderService.update_order(
            db, 1, _input(info="Changed", customer_id=2, items=("Desk",))
        ))
        assert message == "Order updated successfully!"
        db.expire_all()
        order = db.get(Order, 1)
        assert order.order_information == "Changed"
        assert order.customer_id == 2
        assert order.customer.name == "Jane Smith"
        assert [i.name for i in order.items] == ["Desk"]
        assert order.order_date > before

    def test_unknown_order(self, db):
        with pytest.raises(NotFoundError, match="Order not found."):
            run(OrderService.update_order(db, 999, _input()))

    def test_same_validation_as_create(self, seed_orders):
        with pytest.raises(ValidationError, match="At least one item is required for the order."):
            run(OrderService.update_order(seed_orders, 1, _input(items=())))

    def test_unknown_customer(self, seed_orders):
        with pytest.raises(NotFoundError, match="Customer with the provided ID not found."):
            run(OrderService.update_order(seed_orders, 1, _input(customer_id=999)))

    def test_store_failure_leaves_order_unchanged(self, seed_orders, monkeypatch):
        db = seed_orders
        before = db.get(Order, 1).order_date
        _break_commit(db, monkeypatch)
        with pytest.raises(PersistenceError, match="Failed to update the order.") as excinfo:
            run(OrderService.update_order(
                db, 1, _input(info="Changed", customer_id=2, items=("Desk",))
            ))
        assert isinstance(excinfo.value.__cause__, OperationalError)
        db.expire_all()
        order = db.get(Order, 1)
        assert order.order_information == "First order"
        assert order.customer_id == 1
        assert order.order_date == before
        assert sorted(i.name for i in order.items) == ["Keyboard", "Mouse"]


class TestDeleteOrder:

    def test_delete_then_get_is_not_found(self, seed_orders):
        run(OrderService.delete_order(seed_orders, 1))
        with pytest.raises(NotFoundError):
            run(OrderService.get_order(seed_orders, 1))

    def test_items_survive_order_deletion(self, seed_orders):
        count = seed_orders.query(Item).count()
        run(OrderService.delete_order(seed_orders, 2))
        assert seed_orders.query(Item).count() == count

    def test_unknown_order(self, db):
        with pytest.raises(NotFoundError, match="Order not found."):
            run(OrderService.delete_order(db, 999))

    def test_store_failure_keeps_order(self, seed_orders, monkeypatch):
        db = seed_orders
        _break_commit(db, monkeypatch)
        with pytest.raises(PersistenceError, match="Failed to delete the order.") as excinfo:
            run(OrderService.delete_order(db, 1))
        assert isinstance(excinfo.value.__cause__, OperationalError)
        db.expire_all()
        assert db.get(Order, 1) is not None
