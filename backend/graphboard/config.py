import json
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from graphboard.compiler.types import GroupRule

# Load .env from project root
load_dotenv()

CANVAS_BASE_URL = os.getenv("CANVAS_BASE_URL", "https://api.miro.com/v2")
CANVAS_TOKEN = os.getenv("CANVAS_TOKEN", "")
CANVAS_BOARD_ID = os.getenv("CANVAS_BOARD_ID", "")
CANVAS_RATE_LIMIT = int(os.getenv("CANVAS_RATE_LIMIT", "900"))
CANVAS_RATE_PERIOD = float(os.getenv("CANVAS_RATE_PERIOD", "60"))
CANVAS_TIMEOUT = float(os.getenv("CANVAS_TIMEOUT", "30"))

GRAPH_SOURCE_PATH = os.getenv("GRAPH_SOURCE_PATH", "")
GROUP_RULES_PATH = os.getenv("GROUP_RULES_PATH", "")
PARSE_POLICY = os.getenv("PARSE_POLICY", "skip")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_GROUP_RULES = [
    {"pattern": ".*", "color": "gray"},
]


def parse_group_rules(entries: List[dict]) -> List[GroupRule]:
    """
    Build GroupRules from plain {"pattern", "color"} mappings.
    List order is kept: it decides which rule wins.
    """
    rules = []
    for entry in entries:
        if "pattern" not in entry or "color" not in entry:
            raise ValueError(f"Group rule needs 'pattern' and 'color': {entry}")
        rules.append(GroupRule.from_strings(entry["pattern"], entry["color"]))
    return rules


def load_group_rules(path: Optional[str] = None) -> List[GroupRule]:
    path = path if path is not None else GROUP_RULES_PATH
    if not path:
        return parse_group_rules(DEFAULT_GROUP_RULES)

    entries = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"Group rules file must hold a JSON list: {path}")
    return parse_group_rules(entries)
