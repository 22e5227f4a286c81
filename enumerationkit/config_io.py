from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from enumerationkit.config import SECTION, EnumerationConfig

DEFAULT_ENV_VAR = "ENUMERATIONKIT_CONFIG"

logger = logging.getLogger(__name__)


def _read_section(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        try:
            payload = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(payload, Mapping):
        raise ValueError(f"Config file must contain a YAML mapping: {path}")
    section = payload.get(SECTION) or {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{SECTION} in {path} must be a mapping (type={type(section).__name__})")
    return dict(section)


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env_var: str | None = DEFAULT_ENV_VAR,
) -> tuple[EnumerationConfig, dict[str, Any]]:
    """
    Load builder settings from a YAML file.

    An explicit `path` wins over `env_var`. With neither, defaults are returned.
    Keys in a sibling `<name>.local.yaml` replace those of the base file.
    """

    if path is not None:
        raw_path, mode = str(path).strip(), "explicit"
    else:
        raw_path, mode = (os.environ.get(env_var, "").strip() if env_var else ""), "env"

    if not raw_path:
        return EnumerationConfig(), {"mode": "defaults", "paths": [], "env_var": env_var}

    base_path = os.path.abspath(os.path.expanduser(raw_path))
    if not os.path.exists(base_path):
        raise FileNotFoundError(f"Missing config file: {base_path}")

    section = _read_section(base_path)
    loaded_paths = [base_path]

    root, ext = os.path.splitext(base_path)
    overlay_path = f"{root}.local{ext or '.yaml'}"
    if os.path.exists(overlay_path):
        section.update(_read_section(overlay_path))
        loaded_paths.append(overlay_path)
        mode += "+local"

    logger.debug("Loaded enumeration config (mode=%s, paths=%s)", mode, loaded_paths)
    meta = {"mode": mode, "paths": loaded_paths, "env_var": env_var}
    return EnumerationConfig.from_dict({SECTION: section}), meta
