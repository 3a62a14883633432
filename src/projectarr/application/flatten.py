"""Shallow flattening of domain records into view-model dicts."""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic.alias_generators import to_camel


def camel_fields(entity: Any) -> dict[str, Any]:
    """Top-level fields of a dataclass record, keyed in camelCase.

    Values are the record's own objects (no copy); nested records are
    rendered later by the serializer.
    """
    return {
        to_camel(f.name): getattr(entity, f.name) for f in dataclasses.fields(entity)
    }


def flatten(entity: Any, **computed: Any) -> dict[str, Any]:
    """Original fields of ``entity`` followed by the computed ``computed`` fields.

    Computed keys are given in camelCase and win over same-named fields,
    e.g. a projected ``trailerStreams`` replaces the raw one.
    """
    view = camel_fields(entity)
    view.update(computed)
    return view
