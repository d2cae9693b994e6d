from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# JSON schema type -> python types accepted for it
JSON_TYPES: Dict[str, Tuple[type, ...]] = {
    "string": (str,),
    "number": (int, float),
    "boolean": (bool,),
}


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: str   # "string" | "number" | "boolean"
    description: str
    required: bool = False
    allowed_values: Optional[Tuple[Any, ...]] = None

    def schema(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.allowed_values is not None:
            out["enum"] = list(self.allowed_values)
        return out

    def accepts(self, value: Any) -> bool:
        # bool is an int subclass; never let it pass as a number
        if self.type == "number" and isinstance(value, bool):
            return False
        return isinstance(value, JSON_TYPES[self.type])


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    fields: Tuple[FieldSpec, ...] = ()

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {f.name: f.schema() for f in self.fields},
            "required": list(self.required),
        }

    def as_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema}


@dataclass(frozen=True)
class ToolInvocation:
    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)
