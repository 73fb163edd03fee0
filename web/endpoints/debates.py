"""Debate, argument and XML export endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import PlainTextResponse
from starlette.status import HTTP_201_CREATED, HTTP_404_NOT_FOUND

from debate_hall.database import DatabaseManager, to_argument, to_debate
from debate_hall.scoring import compute_stats, compute_stats_by_debate
from debate_hall.xml_export import export_debate_xml
from web.auth_utils import get_current_user
from web.debate_schemas import (
    ArgumentCreateRequest,
    ArgumentResponse,
    DebateCreateRequest,
    DebateDetailResponse,
    DebateResponse,
    DebateStatsResponse,
    DebateSummaryResponse,
)
from web.dependencies import get_debate_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", dependencies=[Depends(get_current_user)])


@router.post("/debates", response_model=DebateResponse, status_code=HTTP_201_CREATED)
async def create_debate(
    setup: DebateCreateRequest,
    current_user: dict = Depends(get_current_user),
    db: DatabaseManager = Depends(get_debate_db),
):
    """Create a new debate."""
    try:
        debate = db.create_debate(setup.title, setup.description, created_by=current_user["id"])
        return DebateResponse(**debate)
    except Exception as e:
        logger.error(f"Create debate error: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.get("/debates", response_model=list[DebateSummaryResponse])
async def list_debates(db: DatabaseManager = Depends(get_debate_db)):
    """List all debates, newest first, each with its stats."""
    try:
        debates = db.list_debates()
        debate_ids = [debate["id"] for debate in debates]

        grouped = db.list_arguments_for_debates(debate_ids)
        stats_by_debate = compute_stats_by_debate(
            {
                debate_id: [to_argument(row) for row in rows]
                for debate_id, rows in grouped.items()
            },
            debate_ids,
        )

        return [
            DebateSummaryResponse(
                **debate,
                stats=DebateStatsResponse.from_stats(stats_by_debate[debate["id"]]),
            )
            for debate in debates
        ]
    except Exception as e:
        logger.error(f"List debates error: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.get("/debates/{debate_id}", response_model=DebateDetailResponse)
async def get_debate(debate_id: int, db: DatabaseManager = Depends(get_debate_db)):
    """Get a single debate with its arguments and stats."""
    try:
        debate = db.get_debate(debate_id)
        if not debate:
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Debate not found")

        arguments = db.list_arguments(debate_id)
        stats = compute_stats(to_argument(row) for row in arguments)

        return DebateDetailResponse(
            debate=DebateResponse(**debate),
            arguments=[ArgumentResponse(**row) for row in arguments],
            stats=DebateStatsResponse.from_stats(stats),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Get debate error: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.post(
    "/debates/{debate_id}/arguments",
    response_model=ArgumentResponse,
    status_code=HTTP_201_CREATED,
)
async def add_argument(
    debate_id: int,
    argument: ArgumentCreateRequest,
    current_user: dict = Depends(get_current_user),
    db: DatabaseManager = Depends(get_debate_db),
):
    """Add a for/against argument to a debate."""
    try:
        if not db.get_debate(debate_id):
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Debate not found")

        stored = db.add_argument(
            debate_id,
            argument.side,
            argument.text,
            argument.author_name or current_user["username"],
            user_id=current_user["id"],
        )
        return ArgumentResponse(**stored)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Add argument error: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.get("/debates/{debate_id}/export-xml", response_class=Response)
async def export_debate(debate_id: int, db: DatabaseManager = Depends(get_debate_db)):
    """Export a debate and its arguments as an XML document."""
    try:
        debate = db.get_debate(debate_id)
        if not debate:
            return PlainTextResponse("Debate not found", status_code=HTTP_404_NOT_FOUND)

        arguments = [to_argument(row) for row in db.list_arguments(debate_id)]
        xml = export_debate_xml(to_debate(debate), arguments)
        return Response(content=xml, media_type="application/xml")
    except Exception as e:
        logger.error(f"Export XML error: {e}")
        return PlainTextResponse("Server error", status_code=500)
