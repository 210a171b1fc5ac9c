import threading

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from loguru import logger
from pydantic import BaseModel, TypeAdapter

from menet.cache import AnalysisCache
from menet.domain.network import Network
from menet.domain.warnings import ValidationWarning
from menet.errors import NetworkImportError, StoreError
from menet.example_network import create_example_network
from menet.export.network_json import (
    generate_export_filename,
    parse_network_json,
    serialize_network,
)
from menet.export.report import (
    build_summary_report,
    format_summary_report_as_markdown,
    generate_report_filename,
)
from menet.network_store.base import NetworkStore
from menet.validation.validate import get_conflict_details, validate_network
from menet.warning_store.base import WarningStateStore

_warning_list = TypeAdapter(list[ValidationWarning])


def _json_response(model: BaseModel) -> Response:
    # model_dump_json writes infinite fragility as "Infinity"
    return Response(
        content=model.model_dump_json(by_alias=True), media_type="application/json"
    )


def _persist(store: NetworkStore | WarningStateStore) -> None:
    try:
        store.save()
    except ValueError:
        # In-memory store without a backing file
        pass
    except OSError as e:
        raise StoreError(f"Failed to persist {type(store).__name__}: {str(e)}") from e


def _create_get_network_endpoint(network_store: NetworkStore):
    async def get_network() -> Response:
        return _json_response(network_store.get_network())

    return get_network


def _create_put_network_endpoint(
    network_store: NetworkStore, analysis_cache: AnalysisCache, lock: threading.Lock
):
    """Create the network import endpoint handler."""

    async def put_network(request: Request) -> Response:
        body = (await request.body()).decode("utf-8", errors="replace")
        try:
            network = parse_network_json(body)
        except NetworkImportError as e:
            logger.warning(f"Rejected network import: {str(e)}")
            raise HTTPException(status_code=422, detail=str(e)) from e

        with lock:
            network_store.replace_network(network)
            analysis_cache.invalidate()
            _persist(network_store)

        logger.info(f"Imported network with {network.node_count()} nodes")
        return _json_response(network.stats())

    return put_network


def _create_export_network_endpoint(network_store: NetworkStore):
    async def export_network() -> Response:
        network = network_store.get_network()
        return Response(
            content=serialize_network(network),
            media_type="application/json",
            headers={
                "Content-Disposition": f'attachment; filename="{generate_export_filename()}"'
            },
        )

    return export_network


def _create_load_example_endpoint(
    network_store: NetworkStore, analysis_cache: AnalysisCache, lock: threading.Lock
):
    async def load_example() -> Response:
        network = create_example_network()
        with lock:
            network_store.replace_network(network)
            analysis_cache.invalidate()
            _persist(network_store)
        logger.info("Loaded example network")
        return _json_response(network)

    return load_example


def _create_analysis_endpoint(network_store: NetworkStore, analysis_cache: AnalysisCache):
    async def get_analysis() -> Response:
        return _json_response(analysis_cache.get(network_store.get_network()))

    return get_analysis


def _create_validation_endpoint(network_store: NetworkStore, warning_store: WarningStateStore):
    async def get_validation() -> Response:
        result = validate_network(network_store.get_network(), warning_store.get_state())
        return _json_response(result)

    return get_validation


def _create_node_warnings_endpoint(
    network_store: NetworkStore, warning_store: WarningStateStore
):
    """Create the per-node warnings endpoint handler."""

    async def get_node_warnings(node_id: str) -> Response:
        network = network_store.get_network()
        if not _has_node(network, node_id):
            logger.warning(f"Warnings requested for unknown node {node_id}")
            raise HTTPException(status_code=404, detail="Node not found")

        result = validate_network(network, warning_store.get_state())
        warnings = result.by_node_id.get(node_id, [])
        return Response(
            content=_warning_list.dump_json(warnings, by_alias=True),
            media_type="application/json",
        )

    return get_node_warnings


def _has_node(network: Network, node_id: str) -> bool:
    return any(
        node.id == node_id for node in [*network.behaviours, *network.outcomes, *network.values]
    )


def _ensure_warning_exists(network_store: NetworkStore, warning_id: str) -> None:
    result = validate_network(network_store.get_network())
    if not any(warning.id == warning_id for warning in result.warnings):
        logger.warning(f"Unknown warning {warning_id}")
        raise HTTPException(status_code=404, detail="Warning not found")


def _create_snooze_endpoint(
    network_store: NetworkStore, warning_store: WarningStateStore, lock: threading.Lock
):
    async def snooze_warning(warning_id: str, hours: float | None = None) -> Response:
        if hours is not None and hours <= 0:
            raise HTTPException(status_code=422, detail="hours must be positive")
        _ensure_warning_exists(network_store, warning_id)
        with lock:
            state = warning_store.snooze(warning_id, hours=hours)
            _persist(warning_store)
        return _json_response(state)

    return snooze_warning


def _create_dismiss_endpoint(
    network_store: NetworkStore, warning_store: WarningStateStore, lock: threading.Lock
):
    async def dismiss_warning(warning_id: str) -> Response:
        _ensure_warning_exists(network_store, warning_id)
        with lock:
            state = warning_store.dismiss(warning_id)
            _persist(warning_store)
        return _json_response(state)

    return dismiss_warning


def _create_undismiss_endpoint(warning_store: WarningStateStore, lock: threading.Lock):
    # Stale ids are allowed so dismissals can be cleared after the node is gone
    async def undismiss_warning(warning_id: str) -> Response:
        with lock:
            state = warning_store.undismiss(warning_id)
            _persist(warning_store)
        return _json_response(state)

    return undismiss_warning


def _create_conflicts_endpoint(network_store: NetworkStore):
    async def get_conflicts(behaviour_id: str) -> Response:
        network = network_store.get_network()
        if behaviour_id not in network.behaviours_by_id():
            logger.warning(f"Conflicts requested for unknown behaviour {behaviour_id}")
            raise HTTPException(status_code=404, detail="Behaviour not found")
        return _json_response(get_conflict_details(network, behaviour_id))

    return get_conflicts


def _create_report_endpoint(network_store: NetworkStore, analysis_cache: AnalysisCache):
    """Create the Markdown report endpoint handler."""

    async def get_report() -> PlainTextResponse:
        network = network_store.get_network()
        data = build_summary_report(network, analysis_cache.get(network))
        return PlainTextResponse(
            content=format_summary_report_as_markdown(data),
            media_type="text/markdown",
            headers={
                "Content-Disposition": f'attachment; filename="{generate_report_filename()}"'
            },
        )

    return get_report


def _create_report_json_endpoint(network_store: NetworkStore, analysis_cache: AnalysisCache):
    async def get_report_json() -> Response:
        network = network_store.get_network()
        return _json_response(build_summary_report(network, analysis_cache.get(network)))

    return get_report_json


def get_endpoints_router(
    *,
    network_store: NetworkStore,
    warning_store: WarningStateStore,
    analysis_cache: AnalysisCache,
) -> APIRouter:
    router = APIRouter()
    lock = threading.Lock()

    @router.get("/health")
    async def health():
        return {"status": "ok"}

    router.get("/api/network")(_create_get_network_endpoint(network_store))
    router.put("/api/network")(
        _create_put_network_endpoint(network_store, analysis_cache, lock)
    )
    router.get("/api/network/export")(_create_export_network_endpoint(network_store))
    router.post("/api/network/example")(
        _create_load_example_endpoint(network_store, analysis_cache, lock)
    )
    router.get("/api/analysis")(_create_analysis_endpoint(network_store, analysis_cache))
    router.get("/api/validation")(_create_validation_endpoint(network_store, warning_store))
    router.get("/api/warnings/{node_id}")(
        _create_node_warnings_endpoint(network_store, warning_store)
    )
    router.post("/api/warnings/{warning_id}/snooze")(
        _create_snooze_endpoint(network_store, warning_store, lock)
    )
    router.post("/api/warnings/{warning_id}/dismiss")(
        _create_dismiss_endpoint(network_store, warning_store, lock)
    )
    router.post("/api/warnings/{warning_id}/undismiss")(
        _create_undismiss_endpoint(warning_store, lock)
    )
    router.get("/api/conflicts/{behaviour_id}")(_create_conflicts_endpoint(network_store))
    router.get("/api/report")(_create_report_endpoint(network_store, analysis_cache))
    router.get("/api/report.json")(_create_report_json_endpoint(network_store, analysis_cache))

    return router
