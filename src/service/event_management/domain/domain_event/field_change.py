from typing import Any, Dict

import attrs


@attrs.define(frozen=True)
class FieldChange:
    """Before/after value of one field in an update diff."""

    old: Any
    new: Any


Changes = Dict[str, FieldChange]
