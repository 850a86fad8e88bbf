"""
Data abstraction layer over a pluggable backend connector.

Business code talks to ``DbAbstractionLayer`` instead of a concrete backend.
Every operation issues exactly one connector call and returns its result
unchanged; a few lookups first wrap their identifier into a search query.
"""

import logging
from typing import Any, Dict, Optional

from database.queries import (
    ATTRIBUTES_TYPE,
    ORDERS_TYPE,
    PRODUCT_TYPE,
    TAGS_TYPE,
    build_orders_by_user_query,
    build_product_query,
)
from shared.config import get_search_index

logger = logging.getLogger(__name__)


class DbAbstractionLayer:
    """
    Domain-oriented facade over a single connector.

    Catalog, basket, comparison, user, order and payment operations are
    forwarded to the connector. Errors raised by the connector propagate
    untouched, and deferred results (awaitables, references) are returned
    without being resolved.

    Usage:
        dal = DbAbstractionLayer(connector=FirestoreConnector(...))
        product_ref = dal.get_one_product("abc123")
    """

    def __init__(self, connector: Any, index: Optional[str] = None):
        """
        Initialize the abstraction layer.

        Args:
            connector: Backend implementing the ``Connector`` capability set
            index: Search index for product, tag, attribute and order lookups
                (defaults to the configured SEARCH_INDEX)

        Raises:
            ValueError: If no connector is supplied
        """
        if connector is None:
            raise ValueError("DbAbstractionLayer requires a connector")

        self.connector = connector
        self.index = index if index is not None else get_search_index()

        logger.info(
            f"DbAbstractionLayer initialized (connector={type(connector).__name__}, index={self.index})"
        )

    def _call(self, method_name: str, *args: Any) -> Any:
        # Arguments are not logged: they may carry credentials.
        logger.debug(f"Forwarding {method_name} to connector")
        return getattr(self.connector, method_name)(*args)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def add_general_category(self, general_category_form: Any) -> Any:
        """Add a general category."""
        return self._call("add_general_category", general_category_form)

    def add_category(self, category_form: Any) -> Any:
        """Add a category."""
        return self._call("add_category", category_form)

    def add_attribute(self, attribute_form: Any, category_id: str) -> Any:
        """
        Add a new attribute to a category.

        Args:
            attribute_form: Attribute payload
            category_id: Id of the owning category
        """
        return self._call("add_attribute", attribute_form, category_id)

    def add_tag(self, tag_form: Any, category_id: str) -> Any:
        """
        Add a new tag to a category.

        Args:
            tag_form: Tag payload
            category_id: Id of the owning category
        """
        return self._call("add_tag", tag_form, category_id)

    def add_product(self, product: Any) -> Any:
        return self._call("add_product", product)

    def get_one_product(self, product_id: Any) -> Any:
        """
        Get a single product by id.

        The connector receives an exact-match query on ``_id`` rather than
        the raw id.

        Args:
            product_id: Id of the product

        Returns:
            Reference to the product as returned by the connector
        """
        query_obj = build_product_query(self.index, product_id)
        return self._call("get_one_product", query_obj)

    def get_products_by_ids(self, query_obj: Dict[str, Any]) -> Any:
        """Get the products matching a caller-built query object."""
        return self._call("request_data", self.index, PRODUCT_TYPE, query_obj)

    def get_tags(self, query_obj: Dict[str, Any]) -> Any:
        """Get the tags matching ``query_obj``."""
        return self._call("request_data", self.index, TAGS_TYPE, query_obj)

    def get_attributes(self, query_obj: Dict[str, Any]) -> Any:
        """Get the attributes matching ``query_obj``."""
        return self._call("request_data", self.index, ATTRIBUTES_TYPE, query_obj)

    def request_data(self, index: str, type_: str, query_obj: Dict[str, Any]) -> Any:
        """
        Get the data hits of a search query.

        Args:
            index: Search index
            type_: Type inside the index
            query_obj: Search query object

        Returns:
            Reference to the requested hits
        """
        return self._call("request_data", index, type_, query_obj)

    def request_full_data(self, index: str, type_: str, query_obj: Dict[str, Any]) -> Any:
        """
        Get the full search response of a query.

        Args:
            index: Search index
            type_: Type inside the index
            query_obj: Search query object

        Returns:
            Reference to the requested data
        """
        return self._call("request_full_data", index, type_, query_obj)

    def request_items_total(self, index: str, type_: str, query_obj: Dict[str, Any]) -> Any:
        """
        Get the total number of items matching a query.

        Args:
            index: Search index
            type_: Type inside the index, forwarded as given
            query_obj: Search query object

        Returns:
            Reference to the item total
        """
        return self._call("request_items_total", index, type_, query_obj)

    # ------------------------------------------------------------------
    # Basket and comparison
    # ------------------------------------------------------------------

    def get_basket_content(self, id: str) -> Any:
        """Get the basket reference of a user or device."""
        return self._call("get_basket_content", id)

    def get_basket_history_by_id(self, id: str) -> Any:
        """Get the basket history reference of a user or device."""
        return self._call("get_basket_history_by_id", id)

    def set_new_basket(self, id: str, new_basket: Any) -> Any:
        """Replace the basket of a user or device."""
        return self._call("set_new_basket", id, new_basket)

    def get_comparison(self, id: str) -> Any:
        return self._call("get_comparison", id)

    def add_product_to_comparison(self, id: str, product: Any) -> Any:
        return self._call("add_product_to_comparison", id, product)

    def remove_product_from_comparison(self, id: str, id_in_comparison: str) -> Any:
        return self._call("remove_product_from_comparison", id, id_in_comparison)

    # ------------------------------------------------------------------
    # Users and sessions
    # ------------------------------------------------------------------

    def register(self, email: str, password: str) -> Any:
        """
        Register a user with email and password.

        Returns:
            Deferred user data as returned by the connector
        """
        return self._call("register", email, password)

    def register_user(self, register_form: Any) -> Any:
        """
        Register a user and store the additional profile fields.

        Args:
            register_form: Email, password and any additional user information
        """
        return self._call("register_user", register_form)

    def get_user_data(self, uid: str) -> Any:
        return self._call("get_user_data", uid)

    def login_email(self, email: str, password: str) -> Any:
        """Log in with email and password."""
        return self._call("login_email", email, password)

    def logout(self) -> Any:
        return self._call("logout")

    def reset_password(self, email: str) -> Any:
        """Send a password reset letter to ``email``."""
        return self._call("reset_password", email)

    def check_old_session_flow(self, device_id: str) -> Any:
        return self._call("check_old_session_flow", device_id)

    def connect_session_flow_to_db(self, session_flow: Any, device_id: str, session_id: str) -> Any:
        """
        Connect a session tracker to the database.

        Args:
            session_flow: Session tracking service
            device_id: Device id generated by the tracker
            session_id: Session id generated by the tracker
        """
        return self._call("connect_session_flow_to_db", session_flow, device_id, session_id)

    def get_visited_routes(self) -> Any:
        return self._call("get_visited_routes")

    def get_user_clicks(self) -> Any:
        return self._call("get_user_clicks")

    def get_auth(self) -> Any:
        """Return the connector's auth handle."""
        return self._call("get_auth")

    # ------------------------------------------------------------------
    # Orders and payments
    # ------------------------------------------------------------------

    def save_order(self, order_data: Any) -> Any:
        """Save a new order."""
        return self._call("save_order", order_data)

    def get_order_by_id(self, id: str) -> Any:
        return self._call("get_order_by_id", id)

    def get_orders_by_user_id(self, user_id: Any) -> Any:
        """
        Get the orders placed by a user.

        Args:
            user_id: Id of the user

        Returns:
            Reference to the matching orders
        """
        query_obj = build_orders_by_user_query(user_id)
        return self._call("request_data", self.index, ORDERS_TYPE, query_obj)

    def add_payment_request(self, data: Any, payment_method: str) -> Any:
        """
        Add a payment request for the payment server to process.

        Args:
            data: Payment data
            payment_method: Name of the payment method
        """
        return self._call("add_payment_request", data, payment_method)

    def listen_payment_response(self, payment_key: str) -> Any:
        """
        Get the payment response reference for a payment request.

        Args:
            payment_key: Id shared by the payment request and its response
        """
        return self._call("listen_payment_response", payment_key)
