from pydantic import BaseModel
from typing import Optional, Dict, Any, List


class GroupRuleModel(BaseModel):
    pattern: str  # regular expression, searched in the node name
    color: str    # named note colour


class LayoutRequest(BaseModel):
    graph: str  # edge-list text
    rules: List[GroupRuleModel] = []  # empty -> configured rules
    on_error: Optional[str] = None  # skip | raise; None -> PARSE_POLICY
    dedupe_edges: bool = False


class RenderRequest(LayoutRequest):
    board_id: Optional[str] = None  # falls back to CANVAS_BOARD_ID


class LayoutResponse(BaseModel):
    frames: List[Dict[str, Any]]
    connectors: List[Dict[str, Any]]
    skipped_lines: List[Dict[str, Any]] = []


class RenderResponse(BaseModel):
    status: str
    board_id: str
    frames: List[Dict[str, Any]]
    connector_ids: List[str]
