"""Network JSON export and import."""

import json
from datetime import datetime, timezone
from typing import Any

from loguru import logger
from pydantic import ValidationError

from menet.domain.network import NETWORK_VERSION, Network
from menet.errors import NetworkImportError

REQUIRED_ARRAYS = ("behaviours", "outcomes", "values", "links")


def prepare_network_for_export(network: Network, now: datetime | None = None) -> Network:
    """Stamp the current format version and export time onto a copy of the network."""
    exported_at = (now or datetime.now(timezone.utc)).isoformat()
    return network.model_copy(update={"version": NETWORK_VERSION, "exported_at": exported_at})


def serialize_network(network: Network, now: datetime | None = None) -> str:
    exported = prepare_network_for_export(network, now)
    return exported.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def generate_export_filename(prefix: str = "me-net", now: datetime | None = None) -> str:
    """Filename like ``me-net-2024-05-01-13-45-00.json``."""
    now = now or datetime.now(timezone.utc)
    return f"{prefix}-{now.strftime('%Y-%m-%d-%H-%M-%S')}.json"


def validate_network_structure(data: Any) -> None:
    """Check the top-level shape of parsed network JSON.

    Raises:
        NetworkImportError: If a required array or the version string is missing
    """
    if not isinstance(data, dict):
        raise NetworkImportError("Invalid network structure: Data must be an object")

    for key in REQUIRED_ARRAYS:
        if not isinstance(data.get(key), list):
            raise NetworkImportError(f'Invalid network structure: Missing or invalid "{key}" array')

    if not isinstance(data.get("version"), str):
        raise NetworkImportError('Invalid network structure: Missing or invalid "version" string')


def _format_validation_error(err: ValidationError) -> str:
    first = err.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"Invalid network entity at {location}: {first['msg']}"


def check_referential_integrity(network: Network) -> None:
    """Every link must reference existing nodes.

    Raises:
        NetworkImportError: On the first link with a dangling source or target
    """
    node_ids = {node.id for node in [*network.behaviours, *network.outcomes, *network.values]}

    for link in network.links:
        if link.source_id not in node_ids:
            raise NetworkImportError(
                f'Link "{link.id}" references non-existent source "{link.source_id}"'
            )
        if link.target_id not in node_ids:
            raise NetworkImportError(
                f'Link "{link.id}" references non-existent target "{link.target_id}"'
            )


def parse_network_json(json_string: str) -> Network:
    """Parse and validate imported network JSON.

    Args:
        json_string: Network JSON as written by ``serialize_network``

    Returns:
        The parsed network

    Raises:
        NetworkImportError: If the JSON is malformed, an entity is invalid or a link dangles
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as err:
        raise NetworkImportError(f"Failed to parse JSON: {err}") from err

    validate_network_structure(data)

    try:
        network = Network.model_validate(data)
    except ValidationError as err:
        raise NetworkImportError(_format_validation_error(err)) from err

    check_referential_integrity(network)

    logger.info(
        f"Imported network with {network.node_count()} nodes and {len(network.links)} links"
    )
    return network
