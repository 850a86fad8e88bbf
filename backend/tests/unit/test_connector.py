"""
Unit tests for the Connector contract.
"""

import pytest

from database.abstraction_layer import DbAbstractionLayer
from database.connector import ComparisonNotSpecifiedError, Connector


def _concrete_connector_cls():
    """Build a Connector subclass implementing every required method as a no-op."""
    methods = {name: (lambda self, *args: None) for name in Connector.__abstractmethods__}
    return type("NoopConnector", (Connector,), methods)


class TestConnectorContract:
    """Test the abstract capability set."""

    def test_cannot_instantiate_abstract_connector(self):
        """Verify the base class cannot be used directly."""
        with pytest.raises(TypeError):
            Connector()

    def test_required_capabilities(self):
        """Verify the catalog, basket, auth and order methods are required."""
        required = Connector.__abstractmethods__

        assert {"add_product", "get_one_product", "request_data", "request_full_data",
                "request_items_total", "set_new_basket", "login_email", "logout",
                "save_order", "listen_payment_response"} <= required

    def test_comparison_is_optional(self):
        """Verify comparison methods are not part of the required set."""
        required = Connector.__abstractmethods__

        assert "get_comparison" not in required
        assert "add_product_to_comparison" not in required
        assert "remove_product_from_comparison" not in required

    def test_subclass_with_required_methods_instantiates(self):
        """Verify implementing the required methods is enough."""
        connector = _concrete_connector_cls()()

        assert isinstance(connector, Connector)


class TestComparisonPlaceholder:
    """Test the unspecified comparison capability."""

    @pytest.mark.parametrize("method,args", [
        ("get_comparison", ("u1",)),
        ("add_product_to_comparison", ("u1", {"id": "p1"})),
        ("remove_product_from_comparison", ("u1", "c-3")),
    ])
    def test_default_raises_not_specified(self, method, args):
        """Verify the default comparison methods raise an explicit error."""
        connector = _concrete_connector_cls()()

        with pytest.raises(ComparisonNotSpecifiedError) as exc_info:
            getattr(connector, method)(*args)

        assert exc_info.value.operation == method
        assert isinstance(exc_info.value, NotImplementedError)

    def test_error_propagates_through_abstraction_layer(self):
        """Verify the facade surfaces the connector's placeholder error."""
        dal = DbAbstractionLayer(connector=_concrete_connector_cls()(), index="i")

        with pytest.raises(ComparisonNotSpecifiedError):
            dal.get_comparison("u1")

    def test_override_is_used(self):
        """Verify a connector can provide comparison itself."""
        cls = _concrete_connector_cls()

        class ComparingConnector(cls):
            def get_comparison(self, id):
                return ["p1", "p2"]

        dal = DbAbstractionLayer(connector=ComparingConnector(), index="i")

        assert dal.get_comparison("u1") == ["p1", "p2"]
