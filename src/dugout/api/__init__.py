"""REST API for lineups and their fielding rotations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException, Query, Response

from dugout.api.schemas import (
    LineupCreateRequest,
    LineupData,
    LineupResponse,
    LineupSummaryResponse,
    LineupUpdateRequest,
    PlayerStatsResponse,
    PlayerSummaryResponse,
    PositionResponse,
    RotationPreviewRequest,
    RotationPreviewResponse,
    UnfilledPositionResponse,
)
from dugout.config import POSITION_NAMES, get_position_category, max_lineups_per_owner
from dugout.models import Player, RotationSettings, Sport
from dugout.persistence import LineupRecord, LineupStore
from dugout.rotation import (
    LineupValidationError,
    PlayerRotationSummary,
    ensure_valid_lineup,
    generate_rotation,
    get_available_positions,
    get_player_stats,
    plan_rotation,
    rotation_to_csv,
    summarize_rotation,
    validate_batting_orders,
    validate_player_ids,
)


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)


def _summary_to_response(summary: PlayerRotationSummary) -> PlayerSummaryResponse:
    return PlayerSummaryResponse(
        player_id=summary.player_id,
        name=summary.name,
        batting_order=summary.batting_order,
        innings=summary.innings,
        positions=summary.positions,
        categories=summary.categories,
    )


def _build_lineup_data(sport: Sport, players: List[Player], settings: RotationSettings) -> LineupData:
    return LineupData(
        sport=sport,
        players=players,
        rotation_settings=settings,
        rotation=generate_rotation(players, settings),
    )


def _record_to_data(record: LineupRecord) -> LineupData:
    return LineupData.model_validate(record.data)


def _record_to_response(record: LineupRecord) -> LineupResponse:
    return LineupResponse(
        lineup_id=record.lineup_id,
        owner_id=record.owner_id,
        name=record.name,
        data=_record_to_data(record),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _record_to_summary(record: LineupRecord) -> LineupSummaryResponse:
    data = _record_to_data(record)
    return LineupSummaryResponse(
        lineup_id=record.lineup_id,
        owner_id=record.owner_id,
        name=record.name,
        sport=record.sport,
        players=len(data.players),
        innings=len(data.rotation),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _validate_or_400(name: str, players: List[Player], settings: RotationSettings) -> None:
    try:
        ensure_valid_lineup(name, players, settings)
    except LineupValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.problems) from exc


def create_app() -> FastAPI:
    app = FastAPI(title="dugout rotations")
    store = LineupStore(Path(__file__).resolve().parent.parent / "dugout.sqlite")
    app.state.lineup_store = store

    def _fetch_lineup_or_404(lineup_id: str) -> LineupRecord:
        record = store.get_lineup(lineup_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Lineup not found")
        return record

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/positions", response_model=list[PositionResponse])
    async def positions(use_pitcher: bool = True, use_catcher: bool = True):
        settings = RotationSettings(use_pitcher=use_pitcher, use_catcher=use_catcher)
        return [
            PositionResponse(
                code=position,
                name=POSITION_NAMES[position],
                category=get_position_category(position),
            )
            for position in get_available_positions(settings)
        ]

    @app.post("/rotation/preview", response_model=RotationPreviewResponse)
    async def preview_rotation(request: RotationPreviewRequest):
        if not validate_batting_orders(request.players):
            raise HTTPException(status_code=400, detail="Each player must have a unique batting order")
        if not validate_player_ids(request.players):
            raise HTTPException(status_code=400, detail="Each player must have a unique id")
        plan = plan_rotation(request.players, request.rotation_settings)
        if plan.unfilled:
            logger.info(
                "Rotation preview left %d slot(s) unfilled for %d players",
                len(plan.unfilled),
                len(request.players),
            )
        return RotationPreviewResponse(
            field_positions=list(plan.field_positions),
            rotation=plan.rotation,
            unfilled=[
                UnfilledPositionResponse(inning=item.inning, position=item.position)
                for item in plan.unfilled
            ],
            summaries=[
                _summary_to_response(summary)
                for summary in summarize_rotation(request.players, plan.rotation)
            ],
        )

    @app.post("/lineups", response_model=LineupResponse, status_code=201)
    async def create_lineup(request: LineupCreateRequest):
        _validate_or_400(request.name, request.players, request.rotation_settings)
        cap = max_lineups_per_owner()
        if cap and store.count_lineups(request.owner_id) >= cap:
            raise HTTPException(
                status_code=409,
                detail=(
                    f"You have reached the maximum of {cap} lineups. "
                    "Please delete an existing lineup to create a new one."
                ),
            )
        data = _build_lineup_data(request.sport, request.players, request.rotation_settings)
        record = store.create_lineup(
            owner_id=request.owner_id,
            name=request.name.strip(),
            sport=data.sport.value,
            data=data.model_dump(mode="json", by_alias=True),
        )
        return _record_to_response(record)

    @app.get("/lineups", response_model=list[LineupSummaryResponse])
    async def list_lineups(owner_id: str | None = None, limit: int = Query(default=50, ge=1, le=500)):
        return [_record_to_summary(record) for record in store.list_lineups(owner_id=owner_id, limit=limit)]

    @app.get("/lineups/{lineup_id}", response_model=LineupResponse)
    async def get_lineup(lineup_id: str):
        return _record_to_response(_fetch_lineup_or_404(lineup_id))

    @app.put("/lineups/{lineup_id}", response_model=LineupResponse)
    async def update_lineup(lineup_id: str, request: LineupUpdateRequest):
        record = _fetch_lineup_or_404(lineup_id)
        current = _record_to_data(record)
        name = record.name if request.name is None else request.name
        sport = current.sport if request.sport is None else request.sport
        players = current.players if request.players is None else request.players
        settings = current.rotation_settings if request.rotation_settings is None else request.rotation_settings
        _validate_or_400(name, players, settings)

        if request.players is not None or request.rotation_settings is not None:
            data = _build_lineup_data(sport, players, settings)
        else:
            data = current.model_copy(update={"sport": sport})
        try:
            updated = store.update_lineup(
                lineup_id,
                name=name.strip(),
                sport=data.sport.value,
                data=data.model_dump(mode="json", by_alias=True),
            )
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Lineup not found") from exc
        return _record_to_response(updated)

    @app.delete("/lineups/{lineup_id}", status_code=204)
    async def delete_lineup(lineup_id: str):
        if not store.delete_lineup(lineup_id):
            raise HTTPException(status_code=404, detail="Lineup not found")
        return Response(status_code=204)

    @app.get("/lineups/{lineup_id}/players/{player_id}/stats", response_model=PlayerStatsResponse)
    async def player_stats(lineup_id: str, player_id: str):
        data = _record_to_data(_fetch_lineup_or_404(lineup_id))
        if all(player.id != player_id for player in data.players):
            raise HTTPException(status_code=404, detail="Player not found in lineup")
        stats = get_player_stats(player_id, data.rotation)
        return PlayerStatsResponse(
            lineup_id=lineup_id,
            player_id=player_id,
            innings=sum(stats.values()),
            positions=stats,
        )

    @app.get("/lineups/{lineup_id}/export.csv")
    async def export_csv(lineup_id: str):
        record = _fetch_lineup_or_404(lineup_id)
        data = _record_to_data(record)
        csv_text = rotation_to_csv(data.players, data.rotation)
        return Response(
            content=csv_text,
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={lineup_id}.csv"},
        )

    return app


__all__ = ["create_app"]
