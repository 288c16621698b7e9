"""Trust connection endpoints: connect, disconnect, list, status."""

import logging

from fastapi import APIRouter, HTTPException, Query

from trust_graph import AlreadyConnectedError, SelfConnectError, StoreUnavailableError

from ..models import (
    ConnectionStatusResponse,
    ConnectionsResponse,
    ConnectRequest,
    TrustLinkResponse,
)
from ..state import get_state
from ..utils import to_trust_link

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, response_model=TrustLinkResponse)
def connect(request: ConnectRequest):
    """source_user trusts target_user. 400 on self-connect, 409 if already connected."""
    graph = get_state().trust_graph
    try:
        edge = graph.connect(request.source_user, request.target_user)
    except SelfConnectError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AlreadyConnectedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except StoreUnavailableError as e:
        logger.warning("[api] connect failed: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    return to_trust_link(edge)


@router.delete("")
def disconnect(
    source_user: str = Query(..., min_length=1),
    target_user: str = Query(..., min_length=1),
):
    """Remove source_user -> target_user. Succeeds whether or not the link existed."""
    graph = get_state().trust_graph
    try:
        graph.disconnect(source_user, target_user)
    except StoreUnavailableError as e:
        logger.warning("[api] disconnect failed: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    return {"success": True}


@router.get("/{user_id}", response_model=ConnectionsResponse)
def list_connections(user_id: str):
    graph = get_state().trust_graph
    try:
        outgoing = graph.connections(user_id)
        incoming = graph.trusted_by(user_id)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    neighbors = {e.target for e in outgoing} | {e.source for e in incoming}
    neighbors.discard(user_id)
    return ConnectionsResponse(
        user_id=user_id,
        connections=[to_trust_link(e) for e in outgoing],
        trusted_by=[to_trust_link(e) for e in incoming],
        trusted_neighbors=sorted(neighbors),
    )


@router.get("/{user_id}/status/{target_id}", response_model=ConnectionStatusResponse)
def connection_status(user_id: str, target_id: str):
    graph = get_state().trust_graph
    try:
        status = graph.mutual_status(user_id, target_id)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return ConnectionStatusResponse(
        user_id=user_id,
        target_id=target_id,
        outgoing=status.outgoing,
        incoming=status.incoming,
        mutual=status.mutual,
    )
