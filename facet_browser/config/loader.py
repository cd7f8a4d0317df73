from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from facet_browser.config.model import DEFAULT_PAGE_SIZE, DatasetConfig, GlobalConfig

logger = logging.getLogger(__name__)

DATA_ROOT_ENV = "FACET_BROWSER_DATA_ROOT"


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            datasets/
                large.json
                small.json
                ...

    Each file in 'datasets/' is parsed into a DatasetConfig, in file-name order.
    The resulting GlobalConfig includes:

    - ui_title: title for UI, defaults to 'Data Browser'
    - default_dataset: key of the dataset shown first, defaults to the first configured
    - data_root: directory that relative dataset files resolve against.
                 If relative in global.json, it is resolved relative to 'root'.
    - page_size: rows per table page, defaults to 100
    - datasets: list of DatasetConfigs

    :param root: Directory containing 'global.json' and optionally 'datasets/'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    """
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        raw_global = json.load(f)

    datasets_dir = root / "datasets"
    datasets: List[DatasetConfig] = []

    if datasets_dir.is_dir():
        for idx, config_file in enumerate(sorted(datasets_dir.glob("*.json"))):
            with config_file.open() as f:
                raw = json.load(f)
            datasets.append(
                DatasetConfig.from_raw(raw, source_path=config_file, index=idx)
            )
    else:
        logger.warning("Datasets directory not found", extra={"datasets_dir": str(datasets_dir)})

    data_root_raw = raw_global.get("data_root")
    if data_root_raw is None:
        data_root = None
    else:
        data_root_path = Path(data_root_raw)
        if data_root_path.is_absolute():
            data_root = data_root_path
        else:
            data_root = (root / data_root_path).resolve()

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Data Browser"),
        default_dataset=raw_global.get("default_dataset"),
        data_root=data_root,
        page_size=int(raw_global.get("page_size", DEFAULT_PAGE_SIZE)),
        datasets=datasets,
    )


def resolve_dataset_path(cfg: DatasetConfig, global_config: GlobalConfig) -> Path:
    """
    Resolve a dataset file path.

    Absolute paths are used as-is. Relative paths resolve against
    $FACET_BROWSER_DATA_ROOT if set, else data_root, else the config directory.
    """
    path = cfg.path
    if path.is_absolute():
        return path

    env_root = os.environ.get(DATA_ROOT_ENV)
    if env_root:
        return Path(env_root) / path
    if global_config.data_root is not None:
        return global_config.data_root / path
    return cfg.source_path.parent.parent / path


def load_dataset_registry(root: Path) -> Tuple[GlobalConfig, Dict[str, DatasetConfig]]:
    """
    Load global config + dataset config objects only (no CSV loading).
    Returns mapping of dataset key -> DatasetConfig, in declaration order.
    """
    global_config = load_global_config(root)

    cfg_by_key: Dict[str, DatasetConfig] = {}
    duplicates: List[str] = []

    for ds_cfg in global_config.datasets:
        if ds_cfg.key in cfg_by_key:
            duplicates.append(ds_cfg.key)
            continue
        cfg_by_key[ds_cfg.key] = ds_cfg

    if duplicates:
        raise RuntimeError(f"Duplicate dataset keys in config: {sorted(set(duplicates))}")

    if not cfg_by_key:
        logger.warning("No datasets configured", extra={"config_root": str(root)})

    logger.info(
        "Dataset registry loaded (lazy mode; datasets not materialised)",
        extra={
            "config_root": str(root),
            "n_dataset_configs": len(cfg_by_key),
            "dataset_keys": list(cfg_by_key),
        },
    )

    return global_config, cfg_by_key


def default_dataset_key(global_config: GlobalConfig, cfg_by_key: Dict[str, DatasetConfig]) -> Optional[str]:
    """Configured default if it exists, else the first configured dataset."""
    if global_config.default_dataset in cfg_by_key:
        return global_config.default_dataset
    return next(iter(cfg_by_key), None)
