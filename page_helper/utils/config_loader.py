from __future__ import annotations

import os
from pathlib import Path

import yaml


PROJECT_ROOT = Path(__file__).resolve().parents[2]

CONFIG_ENV = "PAGE_HELPER_CONFIG"


def load_config(path: str | Path | None = None) -> dict:
    """中文：加载 YAML 配置文件并返回字典。
    English: Load the YAML config file into a dict.
    参数:
        path: 配置文件路径，支持相对路径；未传时读取环境变量 PAGE_HELPER_CONFIG，
              再退回到项目根目录下的 config.yaml。
    """

    if path is None:
        path = os.environ.get(CONFIG_ENV) or "config.yaml"

    p = Path(path)
    if not p.is_absolute():
        p = (PROJECT_ROOT / p).resolve()

    with p.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {p}")
    cfg["_project_root"] = str(PROJECT_ROOT)
    return cfg


def safe_cfg_get(cfg: dict, keys: list, default=None):
    cur = cfg
    for k in keys:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
        if cur is None:
            return default
    return cur
