"""Fluent builder for object enumerations.

- Allows call chaining (e.g. `builder.push_instance(a).push_instance(b)`).
- Allows grouping via `push_container` / `pop_container`. Grouping is flat: a pop
  returns to the top level, it does not restore an enclosing container.
"""

from __future__ import annotations

import logging
from typing import Literal

from enumerationkit.combinators import (
    get_container_for_instance,
    merge,
    normalize,
    selector_equals,
)
from enumerationkit.config import EnumerationConfig
from enumerationkit.records import Container, Enumeration, Instance

MergeableField = Literal["properties", "valid_values"]

logger = logging.getLogger(__name__)


class ObjectEnumerationBuilder:
    merge = staticmethod(merge)
    normalize = staticmethod(normalize)
    get_container_for_instance = staticmethod(get_container_for_instance)
    selector_equals = staticmethod(selector_equals)

    def __init__(self, config: EnumerationConfig | None = None) -> None:
        self._config = config or EnumerationConfig()
        self._instances: list[Instance] | None = None
        self._containers: list[Container] | None = None
        self._container_idx: int | None = None

    @property
    def current_container_idx(self) -> int | None:
        return self._container_idx

    def push_instance(
        self, instance: Instance, merge_instances: bool | None = None
    ) -> "ObjectEnumerationBuilder":
        if not isinstance(instance, Instance):
            raise TypeError(f"push_instance expects an Instance (type={type(instance).__name__})")
        if merge_instances is None:
            merge_instances = self._config.merge_instances

        instances = self._instances
        if instances is None:
            instances = self._instances = []

        if self._container_idx is not None:
            instance.container_idx = self._container_idx

        if merge_instances:
            for existing in instances:
                if self.can_merge(existing, instance):
                    self._extend(existing, instance, "properties")
                    self._extend(existing, instance, "valid_values")
                    logger.debug(
                        "Merged instance into existing entry (object_name=%s, container_idx=%s)",
                        instance.object_name,
                        instance.container_idx,
                    )
                    return self

        instances.append(instance)
        return self

    def push_container(self, container: Container) -> "ObjectEnumerationBuilder":
        if not isinstance(container, Container):
            raise TypeError(f"push_container expects a Container (type={type(container).__name__})")

        containers = self._containers
        if containers is None:
            containers = self._containers = []

        containers.append(container)
        self._container_idx = len(containers) - 1
        logger.debug("Pushed container %s at index %d", container.display_name, self._container_idx)
        return self

    def pop_container(self) -> "ObjectEnumerationBuilder":
        self._container_idx = None
        return self

    def complete(self) -> Enumeration | None:
        """Return the accumulated enumeration, or None when nothing was pushed."""

        if self._instances is None:
            return None

        result = Enumeration(instances=self._instances)
        if self._containers is not None:
            result.containers = self._containers
        return result

    @staticmethod
    def can_merge(x: Instance, y: Instance) -> bool:
        return (
            x.object_name == y.object_name
            and x.container_idx == y.container_idx
            and selector_equals(x.selector, y.selector)
        )

    @staticmethod
    def _extend(target: Instance, source: Instance, field_name: MergeableField) -> None:
        source_values = getattr(source, field_name)
        if source_values is None:
            return

        target_values = getattr(target, field_name)
        if target_values is None:
            target_values = {}
            setattr(target, field_name, target_values)

        for key, value in source_values.items():
            # First writer wins.
            if target_values.get(key):
                continue
            target_values[key] = value
