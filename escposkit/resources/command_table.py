from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any


@lru_cache
def load_table_data() -> dict[str, Any]:
    resource = resources.files("escposkit.resources").joinpath("command_table.json")
    with resource.open("r", encoding="utf-8") as f:
        return json.load(f)
