"""POST /api/validate, /api/network, /api/network/svg — network layout endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from trophicnet.dependencies import get_network_config
from trophicnet.engine.assembler import NetworkAssembler
from trophicnet.engine.config import NetworkConfig
from trophicnet.engine.errors import InvalidNetworkError
from trophicnet.engine.levels import NetworkScene
from trophicnet.engine.validator import validate_levels
from trophicnet.models.requests import NetworkRequest
from trophicnet.models.responses import SceneResponse, ValidationResponse
from trophicnet.render.formatter import (
    defects_to_issues,
    defects_to_validation,
    scene_to_response,
)
from trophicnet.render.serializer import scene_to_svg

logger = logging.getLogger(__name__)

router = APIRouter()


def _assemble(req: NetworkRequest, base: NetworkConfig) -> NetworkScene:
    config = req.options.to_config(base)
    try:
        return NetworkAssembler(config).assemble(req.to_levels())
    except InvalidNetworkError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "issues": [i.model_dump() for i in defects_to_issues(e.defects)],
            },
        ) from e


@router.post("/validate", response_model=ValidationResponse)
async def validate(
    req: NetworkRequest,
    base: NetworkConfig = Depends(get_network_config),
) -> ValidationResponse:
    config = req.options.to_config(base)
    defects = validate_levels(req.to_levels(), config)
    return defects_to_validation(defects)


@router.post("/network", response_model=SceneResponse)
async def network(
    req: NetworkRequest,
    base: NetworkConfig = Depends(get_network_config),
) -> SceneResponse:
    start = time.perf_counter()
    scene = _assemble(req, base)
    elapsed = (time.perf_counter() - start) * 1000
    return scene_to_response(scene, processing_time_ms=round(elapsed, 1))


@router.post("/network/svg")
async def network_svg(
    req: NetworkRequest,
    base: NetworkConfig = Depends(get_network_config),
) -> Response:
    scene = _assemble(req, base)
    svg = scene_to_svg(scene, title="Trophic network")
    logger.debug("Rendered SVG: %d chars", len(svg))
    return Response(content=svg, media_type="image/svg+xml")
