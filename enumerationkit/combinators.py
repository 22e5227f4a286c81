"""Stateless helpers over finished enumerations.

`merge` follows the host's historical contract and extends its first argument in
place. Pass `copy=True` (or a config with `copy_on_merge`) to leave both inputs
untouched.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TypeAlias

from enumerationkit.config import EnumerationConfig
from enumerationkit.records import Container, Enumeration, Instance, Selector

EnumerationLike: TypeAlias = Enumeration | list[Instance] | None

logger = logging.getLogger(__name__)


def selector_equals(x: Selector | None | bool, y: Selector | None | bool) -> bool:
    # Falsy selectors (None, False) all mean "no selector".
    x = x or None
    y = y or None

    if x is y:
        return True
    if x is None or y is None:
        return False
    return x.id == y.id and x.metadata == y.metadata


def normalize(x: EnumerationLike) -> Enumeration | None:
    if x is None:
        return None
    if isinstance(x, Enumeration):
        return x
    if isinstance(x, list):
        return Enumeration(instances=x)
    raise TypeError(
        f"Enumeration must be an Enumeration, a list of instances or None (type={type(x).__name__})"
    )


def _copy_instance(instance: Instance) -> Instance:
    return dataclasses.replace(
        instance,
        properties=dict(instance.properties) if instance.properties is not None else None,
        valid_values=dict(instance.valid_values) if instance.valid_values is not None else None,
        extras=dict(instance.extras),
    )


def _copy_enumeration(enumeration: Enumeration) -> Enumeration:
    return Enumeration(
        instances=[_copy_instance(inst) for inst in enumeration.instances],
        containers=list(enumeration.containers) if enumeration.containers is not None else None,
    )


def merge(
    x: EnumerationLike,
    y: EnumerationLike,
    *,
    copy: bool | None = None,
    config: EnumerationConfig | None = None,
) -> Enumeration | None:
    """Append `y` onto `x`, rebasing `y`'s container indices past `x`'s containers."""

    if copy is None:
        copy = config.copy_on_merge if config is not None else False

    x_normalized = normalize(x)
    y_normalized = normalize(y)

    if x_normalized is None or y_normalized is None:
        only = x_normalized if x_normalized is not None else y_normalized
        if copy and only is not None:
            return _copy_enumeration(only)
        return only

    if copy:
        x_normalized = _copy_enumeration(x_normalized)
        y_normalized = _copy_enumeration(y_normalized)

    offset = len(x_normalized.containers) if x_normalized.containers else 0

    for y_instance in y_normalized.instances:
        x_normalized.instances.append(y_instance)
        if y_instance.container_idx is not None:
            y_instance.container_idx += offset

    y_containers = y_normalized.containers
    if y_containers:
        if x_normalized.containers is not None:
            x_normalized.containers.extend(y_containers)
        else:
            x_normalized.containers = y_containers

    logger.debug(
        "Merged enumerations (appended_instances=%d, appended_containers=%d, offset=%d, copy=%s)",
        len(y_normalized.instances),
        len(y_containers or ()),
        offset,
        copy,
    )
    return x_normalized


def get_container_for_instance(enumeration: Enumeration, instance: Instance) -> Container:
    return enumeration.containers[instance.container_idx]  # type: ignore[index]
