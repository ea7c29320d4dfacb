"""
Core type model for code generation.

Converts the external parser's output into immutable definitions that
generators can consume without further validation.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SCALAR_OVERRIDE_FLAG = "java_float"


class SchemaError(Exception):
    """Exception raised for malformed type-model input."""

    pass


class DefinitionKind(Enum):
    """Top-level declaration kinds understood by the generators."""

    RECORD = "struct"
    ENUMERATION = "enum"


@dataclass(frozen=True)
class StructField:
    """A single member of a struct definition."""

    type: str
    name: str
    default_value: str = ""
    scalar_override: bool = False
    custom_flags: FrozenSet[str] = field(default_factory=frozenset)
    doc: str = ""


@dataclass(frozen=True)
class EnumValue:
    """A single enumerator."""

    name: str
    doc: str = ""


@dataclass(frozen=True)
class StructDefinition:
    """A record type with ordered fields."""

    name: str
    fields: Tuple[StructField, ...] = ()
    parent: Optional[str] = None
    doc: str = ""

    @property
    def kind(self) -> DefinitionKind:
        return DefinitionKind.RECORD

    @property
    def is_top_level(self) -> bool:
        return not self.parent


@dataclass(frozen=True)
class EnumDefinition:
    """An enumeration type with ordered values."""

    name: str
    values: Tuple[EnumValue, ...] = ()
    parent: Optional[str] = None
    doc: str = ""

    @property
    def kind(self) -> DefinitionKind:
        return DefinitionKind.ENUMERATION

    @property
    def is_top_level(self) -> bool:
        return not self.parent


TypeDefinition = Union[StructDefinition, EnumDefinition]


def _require(entry: Dict[str, Any], key: str, context: str) -> Any:
    if entry.get(key) is None:
        raise SchemaError(f"Missing '{key}' in {context}")
    return entry[key]


def _optional_str(value: Any) -> str:
    return "" if value is None else str(value)


def _convert_field(
    entry: Dict[str, Any], owner: str, scalar_override_flag: str
) -> StructField:
    context = f"field of '{owner}'"
    if not isinstance(entry, dict):
        raise SchemaError(f"Expected an object for {context}, got {type(entry).__name__}")

    flags = entry.get("custom_flags") or {}
    if not isinstance(flags, (dict, list)):
        raise SchemaError(f"custom_flags of {owner}.{entry.get('name')} must be an object or list")

    # Flag values are ignored; only presence counts.
    flag_names = frozenset(str(name) for name in flags)

    return StructField(
        type=str(_require(entry, "type", context)),
        name=str(_require(entry, "name", context)),
        default_value=_optional_str(entry.get("default_value")),
        scalar_override=scalar_override_flag in flag_names,
        custom_flags=flag_names,
        doc=entry.get("doc") or "",
    )


def _convert_value(entry: Any, owner: str) -> EnumValue:
    if isinstance(entry, str):
        return EnumValue(name=entry)
    if not isinstance(entry, dict):
        raise SchemaError(f"Expected an object for value of '{owner}'")
    return EnumValue(
        name=str(_require(entry, "name", f"value of '{owner}'")),
        doc=entry.get("doc") or "",
    )


def convert_definition(
    entry: Dict[str, Any], scalar_override_flag: str = DEFAULT_SCALAR_OVERRIDE_FLAG
) -> Optional[TypeDefinition]:
    """
    Convert one parser entry into a definition.

    Args:
        entry: Mapping with ``kind``, ``name`` and ``fields`` or ``values``
        scalar_override_flag: Custom flag that forces a scalar float field

    Returns:
        The definition, or None when ``kind`` is not a known variant
    """
    if not isinstance(entry, dict):
        raise SchemaError(f"Expected an object for definition, got {type(entry).__name__}")

    name = str(_require(entry, "name", "definition"))
    kind = entry.get("kind")
    parent = entry.get("parent") or None
    doc = entry.get("doc") or ""

    if kind == DefinitionKind.RECORD.value:
        fields = tuple(
            _convert_field(f, name, scalar_override_flag)
            for f in entry.get("fields") or []
        )
        return StructDefinition(name=name, fields=fields, parent=parent, doc=doc)

    if kind == DefinitionKind.ENUMERATION.value:
        values = tuple(_convert_value(v, name) for v in entry.get("values") or [])
        return EnumDefinition(name=name, values=values, parent=parent, doc=doc)

    logger.debug("Skipping definition '%s' of unsupported kind %r", name, kind)
    return None


def load_definitions(
    entries: List[Dict[str, Any]],
    scalar_override_flag: str = DEFAULT_SCALAR_OVERRIDE_FLAG,
) -> List[TypeDefinition]:
    """Convert an ordered list of parser entries, preserving order."""
    if not isinstance(entries, list):
        raise SchemaError("Definitions must be a list")

    definitions = []
    for entry in entries:
        definition = convert_definition(entry, scalar_override_flag)
        if definition is not None:
            definitions.append(definition)
    return definitions


def load_model(
    data: Dict[str, Any], scalar_override_flag: str = DEFAULT_SCALAR_OVERRIDE_FLAG
) -> "OrderedDict[str, List[TypeDefinition]]":
    """
    Convert a whole model mapping run identifiers to definition lists.

    Args:
        data: ``{run_id: [entry, ...]}`` as produced by the parser
        scalar_override_flag: Custom flag that forces a scalar float field

    Returns:
        Ordered mapping of run identifier to definitions
    """
    if not isinstance(data, dict):
        raise SchemaError("Model must be an object mapping run ids to definitions")

    model: "OrderedDict[str, List[TypeDefinition]]" = OrderedDict()
    for run_id, entries in data.items():
        model[run_id] = load_definitions(entries, scalar_override_flag)
        logger.debug("Loaded %d definitions for run '%s'", len(model[run_id]), run_id)
    return model

