"""Host-contract records consumed and produced by the enumeration builder.

The host application owns these shapes. Only the fields the builder touches are
modeled explicitly; anything else rides along in `extras` and is never inspected.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_INSTANCE_KEYS = ("objectName", "selector", "containerIdx", "properties", "validValues")


def _optional_str(value: Any, *, path: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"{path} must be a string or None (type={type(value).__name__})")


def _optional_mapping(value: Any, *, path: str) -> dict[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise TypeError(f"{path} must be a mapping or None (type={type(value).__name__})")
    return dict(value)


@dataclass(frozen=True)
class Selector:
    id: str | None = None
    metadata: str | None = None
    data: tuple[Any, ...] | None = None

    def __post_init__(self) -> None:
        _optional_str(self.id, path="Selector.id")
        _optional_str(self.metadata, path="Selector.metadata")
        if self.data is not None and not isinstance(self.data, tuple):
            object.__setattr__(self, "data", tuple(self.data))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.id is not None:
            out["id"] = self.id
        if self.metadata is not None:
            out["metadata"] = self.metadata
        if self.data is not None:
            out["data"] = list(self.data)
        return out

    @classmethod
    def from_dict(cls, payload: Any, *, path: str = "selector") -> "Selector | None":
        if payload is None or payload is False:
            return None
        if not isinstance(payload, Mapping):
            raise TypeError(f"{path} must be a mapping (type={type(payload).__name__})")
        data = payload.get("data")
        if data is not None and not isinstance(data, (list, tuple)):
            raise TypeError(f"{path}.data must be a list (type={type(data).__name__})")
        return cls(
            id=_optional_str(payload.get("id"), path=f"{path}.id"),
            metadata=_optional_str(payload.get("metadata"), path=f"{path}.metadata"),
            data=tuple(data) if data is not None else None,
        )


@dataclass
class Instance:
    """One configurable object entry in the enumeration.

    `container_idx` is stamped by the builder; callers leave it unset.
    """

    object_name: str | None
    selector: Selector | None | bool = None
    properties: dict[str, Any] | None = None
    valid_values: dict[str, Any] | None = None
    container_idx: int | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _optional_str(self.object_name, path="Instance.object_name")
        # False is accepted as a host spelling of "no selector".
        if self.selector is not None and self.selector is not False and not isinstance(
            self.selector, Selector
        ):
            raise TypeError(
                f"Instance.selector must be a Selector or None (type={type(self.selector).__name__})"
            )
        if self.container_idx is not None and (
            isinstance(self.container_idx, bool) or not isinstance(self.container_idx, int)
        ):
            raise TypeError(
                f"Instance.container_idx must be an int or None (type={type(self.container_idx).__name__})"
            )
        if not isinstance(self.extras, dict):
            raise TypeError(f"Instance extras must be a dict (type={type(self.extras).__name__})")

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = dict(self.extras)
        if self.object_name is not None:
            out["objectName"] = self.object_name
        if isinstance(self.selector, Selector):
            out["selector"] = self.selector.to_dict()
        if self.container_idx is not None:
            out["containerIdx"] = self.container_idx
        if self.properties is not None:
            out["properties"] = dict(self.properties)
        if self.valid_values is not None:
            out["validValues"] = dict(self.valid_values)
        return out

    @classmethod
    def from_dict(cls, payload: Any, *, path: str = "instance") -> "Instance":
        if not isinstance(payload, Mapping):
            raise TypeError(f"{path} must be a mapping (type={type(payload).__name__})")

        container_idx = payload.get("containerIdx")
        if container_idx is not None:
            if isinstance(container_idx, bool) or not isinstance(container_idx, int):
                raise TypeError(
                    f"{path}.containerIdx must be an int (type={type(container_idx).__name__})"
                )
            if container_idx < 0:
                raise ValueError(f"{path}.containerIdx must be >= 0 (got {container_idx})")

        return cls(
            object_name=_optional_str(payload.get("objectName"), path=f"{path}.objectName"),
            selector=Selector.from_dict(payload.get("selector"), path=f"{path}.selector"),
            properties=_optional_mapping(payload.get("properties"), path=f"{path}.properties"),
            valid_values=_optional_mapping(payload.get("validValues"), path=f"{path}.validValues"),
            container_idx=container_idx,
            extras={k: v for k, v in payload.items() if k not in _INSTANCE_KEYS},
        )


@dataclass
class Container:
    display_name: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.extras)
        if self.display_name is not None:
            out["displayName"] = self.display_name
        return out

    @classmethod
    def from_dict(cls, payload: Any, *, path: str = "container") -> "Container":
        if not isinstance(payload, Mapping):
            raise TypeError(f"{path} must be a mapping (type={type(payload).__name__})")
        return cls(
            display_name=_optional_str(payload.get("displayName"), path=f"{path}.displayName"),
            extras={k: v for k, v in payload.items() if k != "displayName"},
        )


@dataclass
class Enumeration:
    """Canonical result: instances plus the containers they index into."""

    instances: list[Instance]
    containers: list[Container] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"instances": [inst.to_dict() for inst in self.instances]}
        if self.containers is not None:
            out["containers"] = [c.to_dict() for c in self.containers]
        return out

    @classmethod
    def from_payload(cls, payload: Any) -> "Enumeration | None":
        """Parse the host's mapping or bare-list form; `None` stays `None`."""

        if payload is None:
            return None

        if isinstance(payload, (list, tuple)):
            raw_instances: Any = payload
            raw_containers: Any = None
        elif isinstance(payload, Mapping):
            unknown = sorted(k for k in payload.keys() if k not in ("instances", "containers"))
            if unknown:
                raise ValueError(f"Unknown enumeration keys: {', '.join(map(str, unknown))}")
            raw_instances = payload.get("instances")
            raw_containers = payload.get("containers")
            if raw_instances is None:
                raise ValueError("Missing required enumeration key: instances")
        else:
            raise TypeError(
                f"Enumeration payload must be a list or mapping (type={type(payload).__name__})"
            )

        if not isinstance(raw_instances, (list, tuple)):
            raise TypeError(f"instances must be a list (type={type(raw_instances).__name__})")
        instances = [
            Instance.from_dict(item, path=f"instances[{idx}]") for idx, item in enumerate(raw_instances)
        ]

        containers: list[Container] | None = None
        if raw_containers is not None:
            if not isinstance(raw_containers, (list, tuple)):
                raise TypeError(f"containers must be a list (type={type(raw_containers).__name__})")
            containers = [
                Container.from_dict(item, path=f"containers[{idx}]")
                for idx, item in enumerate(raw_containers)
            ]

        container_count = len(containers) if containers is not None else 0
        for idx, inst in enumerate(instances):
            if inst.container_idx is not None and inst.container_idx >= container_count:
                raise ValueError(
                    f"instances[{idx}].containerIdx={inst.container_idx} is out of range "
                    f"(containers: {container_count})"
                )

        return cls(instances=instances, containers=containers)
