"""Application factory for the fplist FastAPI app."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Body, Depends, FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .config import Settings, configure_logging
from .core import InvalidArgumentError, ListSnapshot
from .schemas import HealthResponse, OrderingUpdate, RankedSource, SaveResponse, Source, SourceCreate
from .services import IdentifierIndex, RankedEntry
from .storage import SnapshotStore

logger = logging.getLogger(__name__)

SourceIndex = IdentifierIndex[Source]


def _source_key(source: Source) -> str:
    return source.identifier


def new_source_index() -> SourceIndex:
    return IdentifierIndex(key=_source_key, element_type=Source)


def _to_ranked(row: RankedEntry[Source]) -> RankedSource:
    return RankedSource(
        identifier=row.element.identifier,
        label=row.element.label,
        rank=row.rank,
        count=row.count,
        manual=row.manual,
    )


def _not_found(identifier: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Source {identifier} not found")


def create_app(
    index: SourceIndex | None = None,
    store: SnapshotStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create a configured FastAPI application.

    When no ``index`` is passed a fresh one is created and, if a snapshot store is
    available (passed in or configured through ``FPLIST_SNAPSHOT_PATH``), seeded from
    the stored snapshot.
    """

    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    if store is None and settings.snapshot_path is not None:
        store = SnapshotStore(settings.snapshot_path)

    service = index
    if service is None:
        service = new_source_index()
        stored = store.load(Source) if store is not None else None
        if stored is not None:
            service.reload(stored)
            service.mark_saved()
            logger.info("Seeded ranking from %s", store.path)

    app = FastAPI(title="fplist API", version="0.1.0", description="Frequency ranked sources with a pinned default")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_service() -> SourceIndex:
        return service

    def persist(source_index: SourceIndex) -> bool:
        if store is None or not source_index.has_changed:
            return False
        store.save(source_index.export())
        source_index.mark_saved()
        return True

    def after_change(source_index: SourceIndex) -> None:
        if settings.autosave:
            persist(source_index)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/sources", response_model=list[RankedSource], tags=["sources"])
    def list_sources(source_index: SourceIndex = Depends(get_service)) -> list[RankedSource]:
        return [_to_ranked(row) for row in source_index.ranking()]

    @app.get("/sources/default", response_model=Source, tags=["sources"])
    def default_source(source_index: SourceIndex = Depends(get_service)) -> Source:
        source = source_index.default()
        if source is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No sources recorded")
        return source

    @app.get("/sources/{identifier}", response_model=Source, tags=["sources"])
    def get_source(identifier: str, source_index: SourceIndex = Depends(get_service)) -> Source:
        source = source_index.get(identifier)
        if source is None:
            raise _not_found(identifier)
        return source

    @app.post("/sources", response_model=RankedSource, status_code=status.HTTP_201_CREATED, tags=["sources"])
    def record_source(payload: SourceCreate, source_index: SourceIndex = Depends(get_service)) -> RankedSource:
        source_index.add(payload.to_source(), to_manual=payload.manual)
        after_change(source_index)
        return _to_ranked(source_index.ranked(payload.identifier))

    @app.post("/sources/{identifier}/ordering", response_model=RankedSource, tags=["sources"])
    def change_ordering(
        identifier: str,
        payload: OrderingUpdate,
        source_index: SourceIndex = Depends(get_service),
    ) -> RankedSource:
        try:
            source_index.set_ordering(identifier, to_manual=payload.manual)
        except KeyError as exc:
            raise _not_found(identifier) from exc
        after_change(source_index)
        return _to_ranked(source_index.ranked(identifier))

    @app.delete("/sources/{identifier}", status_code=status.HTTP_204_NO_CONTENT, tags=["sources"])
    def delete_source(identifier: str, source_index: SourceIndex = Depends(get_service)) -> Response:
        if not source_index.remove(identifier):
            raise _not_found(identifier)
        after_change(source_index)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/snapshot", response_model=ListSnapshot[Source], tags=["snapshot"])
    def export_snapshot(source_index: SourceIndex = Depends(get_service)) -> ListSnapshot[Source]:
        return source_index.export()

    @app.put("/snapshot", response_model=ListSnapshot[Source], tags=["snapshot"])
    def import_snapshot(
        payload: Dict[str, Any] = Body(...),
        source_index: SourceIndex = Depends(get_service),
    ) -> ListSnapshot[Source]:
        try:
            source_index.reload(payload)
        except (InvalidArgumentError, ValidationError) as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        after_change(source_index)
        return source_index.export()

    @app.post("/snapshot/save", response_model=SaveResponse, tags=["snapshot"])
    def save_snapshot(source_index: SourceIndex = Depends(get_service)) -> SaveResponse:
        if store is None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No snapshot store configured")
        return SaveResponse(saved=persist(source_index))

    return app


app = create_app()
