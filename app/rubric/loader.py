import os, yaml
from functools import lru_cache
from typing import Dict, Any

SCALES_DIR = os.path.join(os.path.dirname(__file__), "..", "scales")

@lru_cache(maxsize=None)
def load_scale(scale_id: str = "dass21") -> Dict[str, Any]:
    path = os.path.join(SCALES_DIR, f"{scale_id}.yaml")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data.get("id") != scale_id:
        raise ValueError(f"Scale file {path} declares id {data.get('id')!r}")
    return data
