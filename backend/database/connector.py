"""
Connector contract consumed by the data abstraction layer.

A connector wraps the actual backend (document store, search index and
authentication provider). Subclass ``Connector`` to provide one; the
abstraction layer only relies on the methods declared here.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ComparisonNotSpecifiedError(NotImplementedError):
    """Raised by connectors that do not provide the product comparison capability."""

    def __init__(self, operation: str):
        super().__init__(f"Product comparison is not specified yet: {operation} is unavailable")
        self.operation = operation


class Connector(ABC):
    """
    Capability set a backend must offer to sit behind ``DbAbstractionLayer``.

    Payloads (forms, products, orders) are opaque to the abstraction layer and
    are handed over exactly as the caller supplied them. Return values are
    whatever the backend hands out: references, handles or awaitables.
    """

    # Catalog writes

    @abstractmethod
    def add_general_category(self, general_category_form: Any) -> Any:
        pass

    @abstractmethod
    def add_category(self, category_form: Any) -> Any:
        pass

    @abstractmethod
    def add_attribute(self, attribute_form: Any, category_id: str) -> Any:
        pass

    @abstractmethod
    def add_tag(self, tag_form: Any, category_id: str) -> Any:
        pass

    @abstractmethod
    def add_product(self, product: Any) -> Any:
        pass

    # Catalog reads

    @abstractmethod
    def get_one_product(self, query_obj: Dict[str, Any]) -> Any:
        """Resolve a full query object (index, type and query) to one product."""

    @abstractmethod
    def request_data(self, index: str, type_: str, query_obj: Dict[str, Any]) -> Any:
        """Return the hits matching ``query_obj``."""

    @abstractmethod
    def request_full_data(self, index: str, type_: str, query_obj: Dict[str, Any]) -> Any:
        """Return the full search response for ``query_obj``."""

    @abstractmethod
    def request_items_total(self, index: str, type_: str, query_obj: Dict[str, Any]) -> Any:
        """Return the number of items matching ``query_obj``."""

    # Basket

    @abstractmethod
    def get_basket_content(self, id: str) -> Any:
        pass

    @abstractmethod
    def get_basket_history_by_id(self, id: str) -> Any:
        pass

    @abstractmethod
    def set_new_basket(self, id: str, new_basket: Any) -> Any:
        pass

    # Comparison. The data shape is not defined yet, so these are optional.

    def get_comparison(self, id: str) -> Any:
        raise ComparisonNotSpecifiedError("get_comparison")

    def add_product_to_comparison(self, id: str, product: Any) -> Any:
        raise ComparisonNotSpecifiedError("add_product_to_comparison")

    def remove_product_from_comparison(self, id: str, id_in_comparison: str) -> Any:
        raise ComparisonNotSpecifiedError("remove_product_from_comparison")

    # Auth and session

    @abstractmethod
    def register(self, email: str, password: str) -> Any:
        pass

    @abstractmethod
    def register_user(self, register_form: Any) -> Any:
        pass

    @abstractmethod
    def get_user_data(self, uid: str) -> Any:
        pass

    @abstractmethod
    def login_email(self, email: str, password: str) -> Any:
        pass

    @abstractmethod
    def logout(self) -> Any:
        pass

    @abstractmethod
    def reset_password(self, email: str) -> Any:
        pass

    @abstractmethod
    def check_old_session_flow(self, device_id: str) -> Any:
        pass

    @abstractmethod
    def connect_session_flow_to_db(self, session_flow: Any, device_id: str, session_id: str) -> Any:
        pass

    @abstractmethod
    def get_visited_routes(self) -> Any:
        pass

    @abstractmethod
    def get_user_clicks(self) -> Any:
        pass

    @abstractmethod
    def get_auth(self) -> Any:
        pass

    # Orders and payments

    @abstractmethod
    def save_order(self, order_data: Any) -> Any:
        pass

    @abstractmethod
    def get_order_by_id(self, id: str) -> Any:
        pass

    @abstractmethod
    def add_payment_request(self, data: Any, payment_method: str) -> Any:
        pass

    @abstractmethod
    def listen_payment_response(self, payment_key: str) -> Any:
        pass
