"""`enumerationkit` invariants and boundaries.

This module exists to make repository-wide refactors and boundary tests explicit.

1) The core modules (`records`, `builder`, `combinators`, `config`) perform no I/O
   and must not import `yaml`, `os` or `pathlib`. File loading lives in `config_io`.
2) `container_idx` is owned by the builder. It always indexes the containers of the
   enumeration it belongs to, and `merge` rebases it when enumerations are combined.
3) Containers are flat. `pop_container` returns to the top level; callers needing
   nested grouping must track their own cursor.
4) Property and valid-value maps are first-writer-wins when instances merge.
5) "Nothing built" is `None`, never an empty `Enumeration`.
"""
