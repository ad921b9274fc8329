import re

from fastapi import APIRouter, HTTPException, Response

from graphboard.api.serializers import serialize_frames, serialize_layout
from graphboard.canvas.config import get_canvas_client
from graphboard.compiler.parser import ParsePolicy
from graphboard.config import (
    CANVAS_BOARD_ID,
    PARSE_POLICY,
    load_group_rules,
    parse_group_rules,
)
from graphboard.errors import (
    CanvasError,
    ClassificationError,
    IntegrityError,
    ParseError,
)
from graphboard.logging_config import get_logger
from graphboard.pipeline.controller import build_layout_from_text
from graphboard.renderer.board_renderer import render_to_board
from graphboard.renderer.svg_renderer import render_svg
from graphboard.schemas import (
    LayoutRequest,
    LayoutResponse,
    RenderRequest,
    RenderResponse,
)

logger = get_logger(__name__)

router = APIRouter(
    prefix="",
    tags=["graphboard"],
)


def _layout_from_request(request: LayoutRequest):
    try:
        if request.rules:
            rules = parse_group_rules([r.model_dump() for r in request.rules])
        else:
            rules = load_group_rules()
        policy = ParsePolicy(request.on_error or PARSE_POLICY)
    except (re.error, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        return build_layout_from_text(
            request.graph,
            rules,
            on_error=policy,
            dedupe_edges=request.dedupe_edges,
        )
    except (ParseError, ClassificationError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except IntegrityError as e:
        logger.error("layout integrity failure", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/layout", response_model=LayoutResponse)
def layout(request: LayoutRequest):
    return serialize_layout(_layout_from_request(request))


@router.post("/preview")
def preview(request: LayoutRequest):
    svg = render_svg(_layout_from_request(request))
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/render", response_model=RenderResponse)
def render(request: RenderRequest):
    board_id = request.board_id or CANVAS_BOARD_ID
    if not board_id:
        raise HTTPException(status_code=422, detail="No board id given or configured")

    layout = _layout_from_request(request)

    try:
        result = render_to_board(layout, get_canvas_client(), board_id)
    except CanvasError as e:
        logger.error("canvas call failed", error=str(e), status_code=e.status_code)
        raise HTTPException(status_code=502, detail=str(e))
    except IntegrityError as e:
        logger.error("board integrity failure", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "status": "success",
        "board_id": board_id,
        "frames": serialize_frames(result.frames),
        "connector_ids": result.connector_ids,
    }
