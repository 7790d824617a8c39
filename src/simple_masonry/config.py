"""
Layout options schema, resolver, and TOML loader.

Defines the Pydantic model callers use to describe a layout, the frozen
resolved form handed to every downstream stage, and a TOML-based loader
used by the command-line interface.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel
from tomlkit.exceptions import ParseError

from simple_masonry.config_defaults import (
    DEFAULT_CENTERING,
    DEFAULT_COLLAPSING,
    DEFAULT_GUTTER,
)
from simple_masonry.errors import ConfigurationError
from simple_masonry.logging_utils import logger
from simple_masonry.type_defs import CustomizeCallback, Dimension


class LayoutOptions(BaseModel):
    """
    Caller-supplied layout configuration.

    Field names accept both snake_case and camelCase (``gutter_x`` or
    ``gutterX``). Unknown fields are kept and passed through to the
    ``customize`` callback untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    dimensions: list[Dimension] = Field(default_factory=list)
    columns: int = Field(ge=1)
    width: float = Field(gt=0)
    gutter: float = Field(DEFAULT_GUTTER, ge=0)
    gutter_x: float | None = Field(None, ge=0)
    gutter_y: float | None = Field(None, ge=0)
    max_height: float | None = Field(None, gt=0)
    collapsing: bool = DEFAULT_COLLAPSING
    centering: bool = DEFAULT_CENTERING
    customize: CustomizeCallback | None = None


class ResolvedOptions(LayoutOptions):
    """
    Layout options with every optional value made concrete.

    Produced once per layout call by :func:`resolve_options` and passed
    to all later stages, including the ``customize`` callback.
    """

    model_config = ConfigDict(frozen=True)

    gutter_x: float
    gutter_y: float
    column_width: float


def _describe_validation_error(exc: ValidationError) -> str:
    """Collapse a Pydantic error report into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "options"
        parts.append(f"{location}: {error['msg']}")
    return "Invalid layout options: " + "; ".join(parts)


def _by_field_name(data: Mapping[str, Any]) -> dict[str, Any]:
    """Rename camelCase option keys to their snake_case field names."""
    names = {
        field.alias or to_camel(name): name
        for name, field in LayoutOptions.model_fields.items()
    }
    return {names.get(key, key): value for key, value in data.items()}


def _as_mapping(options: LayoutOptions | Mapping[str, Any] | None) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, LayoutOptions):
        data = {
            name: getattr(options, name)
            for name in LayoutOptions.model_fields
        }
        data.update(options.model_extra or {})
        return data
    return _by_field_name(options)


def validate_options(
    options: LayoutOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> LayoutOptions:
    """
    Build a validated :class:`LayoutOptions`.

    Keyword overrides are applied on top of ``options``, whichever of
    the snake_case or camelCase spelling either side uses. Validation
    failures are reported as :class:`ConfigurationError`.
    """
    if isinstance(options, LayoutOptions) and not overrides:
        return options

    data = _as_mapping(options)
    data.update(_by_field_name(overrides))
    try:
        return LayoutOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(_describe_validation_error(exc)) from exc


def resolve_options(
    options: LayoutOptions | Mapping[str, Any],
) -> ResolvedOptions:
    """
    Fill in effective gutters and derive the column width.

    ``gutter_x`` and ``gutter_y`` fall back to ``gutter``. The column
    width is what remains of ``width`` after the horizontal gutters,
    split evenly across ``columns``.

    Raises:
        ConfigurationError: If the options are invalid or the gutters
            leave no room for the columns.

    """
    layout = validate_options(options)

    gutter_x = layout.gutter if layout.gutter_x is None else layout.gutter_x
    gutter_y = layout.gutter if layout.gutter_y is None else layout.gutter_y
    column_width = (
        layout.width - gutter_x * (layout.columns - 1)
    ) / layout.columns
    if column_width <= 0:
        msg = (
            f"Column width must be positive, got {column_width:g} "
            f"(width={layout.width:g}, columns={layout.columns}, "
            f"gutter_x={gutter_x:g})"
        )
        raise ConfigurationError(msg)

    data = _as_mapping(layout)
    data.update(
        gutter_x=gutter_x,
        gutter_y=gutter_y,
        column_width=column_width,
    )
    return ResolvedOptions.model_validate(data)


class ConfigLoader:
    """
    Loads a TOML layout file into validated layout options.

    Top-level keys are option names; items are listed as a
    ``[[dimensions]]`` array of tables.
    """

    @staticmethod
    def load(path: str | Path, **overrides: Any) -> LayoutOptions:
        """
        Load layout options from a TOML file.

        Keyword overrides take precedence over values in the file.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            try:
                doc = tomlkit.load(f)
            except ParseError as exc:
                msg = f"Invalid TOML in {path}: {exc}"
                raise ConfigurationError(msg) from exc

        logger.debug("Loaded layout config from %s", config_path)
        return validate_options(doc.unwrap(), **overrides)
