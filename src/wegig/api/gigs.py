"""Gig log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status

from wegig.api.gig_models import (
    GigChangeResponse,
    GigListResponse,
    GigOut,
    GigPayload,
    GigResponse,
)

if TYPE_CHECKING:
    from wegig.containers import AppContainer

router = APIRouter(prefix="/gigs", tags=["gigs"])


@router.get("")
async def list_gigs(request: Request) -> GigListResponse:
    """Return every logged gig."""
    container: AppContainer = request.app.state.container
    gigs = await container.gig_service.list_gigs()
    return GigListResponse(count=len(gigs), gigs=[GigOut.from_gig(gig) for gig in gigs])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_gig(payload: GigPayload, request: Request) -> GigChangeResponse:
    """Log a new gig."""
    container: AppContainer = request.app.state.container
    gig = await container.gig_service.create_gig(payload.model_dump(exclude_unset=True))
    return GigChangeResponse(message="Gig added successfully", gig=GigOut.from_gig(gig))


@router.get("/{gig_id}")
async def get_gig(gig_id: str, request: Request) -> GigResponse:
    """Return a single gig."""
    container: AppContainer = request.app.state.container
    gig = await container.gig_service.get_gig(gig_id)
    if gig is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return GigResponse(gig=GigOut.from_gig(gig))


@router.patch("/{gig_id}")
async def update_gig(
    gig_id: str, payload: GigPayload, request: Request
) -> GigChangeResponse:
    """Update some fields of a gig."""
    container: AppContainer = request.app.state.container
    gig = await container.gig_service.update_gig(
        gig_id, payload.model_dump(exclude_unset=True)
    )
    if gig is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return GigChangeResponse(
        message="Gig updated successfully", gig=GigOut.from_gig(gig)
    )


@router.delete("/{gig_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gig(gig_id: str, request: Request) -> Response:
    """Remove a gig."""
    container: AppContainer = request.app.state.container
    if not await container.gig_service.delete_gig(gig_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
