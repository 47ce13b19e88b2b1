"""Tests for the Address and Checkout aggregates."""

import pytest
from ordering.address.address import Address
from ordering.checkout.checkout import Checkout
from protean.exceptions import ValidationError


def _address(**overrides):
    defaults = {
        "user_id": "user-1",
        "receiver_name": "Jane Doe",
        "receiver_phone": "+1-555-0100",
        "address": "742 Evergreen Terrace",
    }
    defaults.update(overrides)
    return Address(**defaults)


class TestAddress:
    def test_receiver_fields_are_required(self):
        with pytest.raises(ValidationError) as exc:
            Address(user_id="user-1", receiver_name="Jane Doe")
        assert "receiver_phone" in exc.value.messages
        assert "address" in exc.value.messages

    def test_ring_bell_defaults_to_false(self):
        assert _address().ring_bell is False

    def test_update_is_a_shallow_merge(self):
        address = _address(zip_code="49007")
        address.update_details(floor="2", receiver_name=None)

        assert address.floor == "2"
        assert address.receiver_name == "Jane Doe"
        assert address.zip_code == "49007"

    def test_view_carries_every_detail(self):
        view = _address(door="B").to_view()
        assert view["door"] == "B"
        assert view["user_id"] == "user-1"


class TestCheckout:
    def test_update_details(self):
        checkout = Checkout(user_id="user-1", address_id="a1", basket_id="b1")
        checkout.update_details(comment="Leave at the door")

        assert checkout.comment == "Leave at the door"
        assert checkout.address_id == "a1"
