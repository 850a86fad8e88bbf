"""
Factory wiring a connector into the data abstraction layer.

The connector class is chosen by configuration (DAL_CONNECTOR environment
variable) so business code never imports a concrete backend.
"""

import importlib
import logging
from typing import Any, Optional, Tuple

from database.abstraction_layer import DbAbstractionLayer
from shared.config import get_env_var

logger = logging.getLogger(__name__)

CONNECTOR_ENV_VAR = "DAL_CONNECTOR"


def _split_path(path: str) -> Tuple[str, str]:
    if ":" in path:
        module_name, _, class_name = path.partition(":")
    else:
        module_name, _, class_name = path.rpartition(".")

    if not module_name or not class_name:
        raise ValueError(
            f"Invalid connector path: {path!r}. Expected 'package.module:ClassName'."
        )
    return module_name, class_name


def load_connector(path: Optional[str] = None) -> Any:
    """
    Import and instantiate the configured connector class.

    Args:
        path: "package.module:ClassName" (or dotted form). Read from
            DAL_CONNECTOR when omitted.

    Returns:
        A new connector instance, constructed without arguments

    Raises:
        ValueError: If no path is configured or the path is malformed
    """
    if path is None:
        path = get_env_var(CONNECTOR_ENV_VAR)

    module_name, class_name = _split_path(path)
    module = importlib.import_module(module_name)
    connector_cls = getattr(module, class_name)

    logger.info(f"Loaded connector {class_name} from {module_name}")
    return connector_cls()


def create_abstraction_layer(connector: Any = None, index: Optional[str] = None) -> DbAbstractionLayer:
    """Build a DbAbstractionLayer, loading the configured connector when none is given."""
    if connector is None:
        connector = load_connector()
    return DbAbstractionLayer(connector=connector, index=index)
