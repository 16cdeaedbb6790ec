"""Bootstrap wiring for a session of the lighting core.

Everything is built per session and passed explicitly; there are no
module-level singletons, so tests can build as many isolated sessions
as they need.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from structlog import get_logger

from sgi.application.ports.blob_store import BlobStoreProtocol
from sgi.application.ports.map_widget import MapWidgetProtocol
from sgi.application.ports.time_authority import TimeAuthorityProtocol
from sgi.application.services.authentication_service import AuthenticationService
from sgi.application.services.entity_store import EntityStore, StoreDefaults
from sgi.application.services.map_view_controller import MapViewController
from sgi.application.services.notification_emitter import NotificationEmitter
from sgi.application.services.request_lifecycle_service import RequestLifecycleEngine
from sgi.application.services.request_query_service import ALL, RequestQueryService
from sgi.application.services.suggestion_ranker import (
    OpenDetailCallback,
    SearchBox,
    SuggestionRanker,
)
from sgi.application.services.time_authority_service import SystemTimeAuthority
from sgi.config.lighting_config import DEFAULT_LIGHTING_CONFIG, LightingConfig
from sgi.config.seed_data import GAZETTEER
from sgi.domain.models.lighting_request import LightingRequest, Priority, RequestStatus
from sgi.infrastructure.adapters.json_file_blob_store import JsonFileBlobStore

logger = get_logger()


@dataclass(frozen=True)
class AdminFilter:
    """Dashboard filter applied to the admin map and list."""

    status: RequestStatus | str = ALL
    priority: Priority | str = ALL
    search: str = ""


@dataclass
class SgiSession:
    """All collaborators of one running session, wired together."""

    config: LightingConfig
    store: EntityStore
    time_authority: TimeAuthorityProtocol
    engine: RequestLifecycleEngine
    notifications: NotificationEmitter
    map: MapViewController
    ranker: SuggestionRanker
    search: SearchBox
    auth: AuthenticationService
    queries: RequestQueryService
    admin_filter: AdminFilter = field(default_factory=AdminFilter)
    selected_request_id: int | None = None

    def visible_requests(self) -> list[LightingRequest]:
        """Requests shown on the map for the current user.

        Admins see the dashboard-filtered set; everyone else sees every
        request.
        """
        if self.store.current_user.is_admin:
            return self.queries.filter(
                status=self.admin_filter.status,
                priority=self.admin_filter.priority,
                search=self.admin_filter.search,
            )
        return self.store.requests()

    def set_admin_filter(
        self,
        status: RequestStatus | str = ALL,
        priority: Priority | str = ALL,
        search: str = "",
    ) -> None:
        self.admin_filter = AdminFilter(status=status, priority=priority, search=search)
        self.map.refresh_markers(self.visible_requests())

    def open_detail(self, request: LightingRequest) -> None:
        self.selected_request_id = request.id


def build_blob_store(config: LightingConfig = DEFAULT_LIGHTING_CONFIG) -> JsonFileBlobStore:
    """JSON file store rooted at the configured data directory."""
    logger.info("blob_store_initialized", store_type="json_file", directory=config.data_dir)
    return JsonFileBlobStore(config.data_dir)


def build_session(
    widget: MapWidgetProtocol,
    blob_store: BlobStoreProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    config: LightingConfig = DEFAULT_LIGHTING_CONFIG,
    defaults: StoreDefaults | None = None,
    on_open_detail: OpenDetailCallback | None = None,
) -> SgiSession:
    """Build and wire a session.

    Lifecycle events fan out to the notification emitter and to the map
    marker refresh. The initial view is applied to the widget and the
    markers are rendered once before returning.

    Args:
        widget: The map widget to drive.
        blob_store: Persistence substrate (JSON files under data_dir if None).
        time_authority: Clock (system clock at the configured offset if None).
        config: Lighting configuration.
        defaults: Store defaults (seed data if None).
        on_open_detail: Extra callback when a request suggestion is chosen.
    """
    blobs = blob_store if blob_store is not None else build_blob_store(config)
    clock = time_authority or SystemTimeAuthority(utc_offset_hours=config.utc_offset_hours)

    store = EntityStore(blobs, defaults)
    engine = RequestLifecycleEngine(store, clock, config)
    emitter = NotificationEmitter(store, clock)
    map_controller = MapViewController(widget, store, config)
    ranker = SuggestionRanker(gazetteer=GAZETTEER, limit=config.suggestion_limit)
    queries = RequestQueryService(store)
    auth = AuthenticationService(store)

    session: SgiSession

    def visible() -> list[LightingRequest]:
        return session.visible_requests()

    def open_detail(request: LightingRequest) -> None:
        session.open_detail(request)
        if on_open_detail is not None:
            on_open_detail(request)

    search = SearchBox(
        ranker=ranker,
        map_controller=map_controller,
        visible_requests=visible,
        on_open_detail=open_detail,
        config=config,
    )
    session = SgiSession(
        config=config,
        store=store,
        time_authority=clock,
        engine=engine,
        notifications=emitter,
        map=map_controller,
        ranker=ranker,
        search=search,
        auth=auth,
        queries=queries,
    )

    engine.subscribe(emitter.handle_lifecycle_event)
    engine.subscribe(lambda _event: map_controller.refresh_markers(visible()))

    map_controller.reconcile()
    map_controller.refresh_markers(visible())
    logger.info(
        "session_built",
        requests=len(store.requests()),
        users=len(store.users()),
        environment=config.environment,
    )
    return session
