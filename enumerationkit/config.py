from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

SECTION = "enumeration"


def _flag(section: Mapping[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{SECTION}.{key} must be a boolean (type={type(value).__name__})")
    return value


@dataclass(frozen=True)
class EnumerationConfig:
    merge_instances: bool = True
    copy_on_merge: bool = False

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any] | None) -> "EnumerationConfig":
        """Build from a config mapping holding an optional flat `enumeration` section."""

        if cfg is None:
            return cls()
        if not isinstance(cfg, Mapping):
            raise TypeError(f"Config must be a mapping (type={type(cfg).__name__})")

        section = cfg.get(SECTION)
        if section is None:
            return cls()
        if not isinstance(section, Mapping):
            raise TypeError(f"{SECTION} must be a mapping (type={type(section).__name__})")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in section if k not in known)
        if unknown:
            raise ValueError(f"Unknown config keys under {SECTION}: {', '.join(unknown)}")

        defaults = cls()
        return cls(**{name: _flag(section, name, getattr(defaults, name)) for name in known})
