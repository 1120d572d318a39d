"""Immutable data model for profiles and their variable definitions.

All types are frozen dataclasses. Updates go through small ``with_*`` style
builders that return a new value and leave the receiver untouched, so a
Config can be threaded through a chain of updates without aliasing.

Persistence shape mirrors an externally tagged union for definitions::

    {"Variable": {"name": "A", "required": false}}
    {"Group": {"name": "db", "members": [{"name": "DB_URL", "required": true}]}}

Optional fields are omitted from the output when absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import ValidationError

DEFAULT_PROFILE_NAME = "default"


@dataclass(frozen=True)
class EnvironmentVariable:
    name: str
    description: Optional[str] = None
    required: bool = False
    default_value: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Environment variable name must not be empty.")

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name}
        if self.description is not None:
            out["description"] = self.description
        out["required"] = self.required
        if self.default_value is not None:
            out["default_value"] = self.default_value
        return out

    @classmethod
    def from_dict(cls, data: Any) -> "EnvironmentVariable":
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise ValidationError(f"Invalid environment variable entry: {data!r}")
        required = data.get("required", False)
        if not isinstance(required, bool):
            raise ValidationError(
                f"Invalid \"required\" flag for {data['name']}: {required!r}"
            )
        return cls(
            name=data["name"],
            description=data.get("description"),
            required=required,
            default_value=data.get("default_value"),
        )


@dataclass(frozen=True)
class Variable:
    """A single variable definition."""

    variable: EnvironmentVariable

    @property
    def name(self) -> str:
        return self.variable.name

    def to_dict(self) -> Dict[str, Any]:
        return {"Variable": self.variable.to_dict()}


@dataclass(frozen=True)
class Group:
    """A named, ordered group of variables."""

    name: str
    members: Tuple[EnvironmentVariable, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Group": {
                "name": self.name,
                "members": [m.to_dict() for m in self.members],
            }
        }


Definition = Union[Variable, Group]


def definition_from_dict(data: Any) -> Definition:
    """Decode one tagged definition entry."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValidationError(f"Invalid definition entry: {data!r}")
    tag, body = next(iter(data.items()))
    if tag == "Variable":
        return Variable(EnvironmentVariable.from_dict(body))
    if tag == "Group":
        if not isinstance(body, dict):
            raise ValidationError(f"Invalid group entry: {body!r}")
        members = body.get("members") or []
        if not isinstance(members, list):
            raise ValidationError(f"Invalid group members: {members!r}")
        return Group(
            name=str(body.get("name", "")),
            members=tuple(EnvironmentVariable.from_dict(m) for m in members),
        )
    raise ValidationError(f"Unknown definition kind: {tag!r}")


@dataclass(frozen=True)
class Profile:
    name: str
    description: Optional[str] = None
    definitions: Tuple[Definition, ...] = ()

    def variables_named(self, name: str) -> List[Variable]:
        """Return ``Variable`` entries matching ``name`` exactly; groups are skipped."""
        return [
            d for d in self.definitions if isinstance(d, Variable) and d.name == name
        ]

    def with_definition(self, definition: Definition) -> "Profile":
        return replace(self, definitions=self.definitions + (definition,))

    def without_variable(self, name: str) -> "Profile":
        kept = tuple(
            d
            for d in self.definitions
            if not (isinstance(d, Variable) and d.name == name)
        )
        return replace(self, definitions=kept)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name}
        if self.description is not None:
            out["description"] = self.description
        out["definitions"] = [d.to_dict() for d in self.definitions]
        return out

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        if not isinstance(data, dict):
            raise ValidationError(f"Invalid profile entry: {data!r}")
        defs = data.get("definitions") or []
        if not isinstance(defs, list):
            raise ValidationError(f"Invalid definitions list: {defs!r}")
        return cls(
            name=str(data.get("name", "")),
            description=data.get("description"),
            definitions=tuple(definition_from_dict(d) for d in defs),
        )


def _missing_profile_message(name: Optional[str], config_file: str) -> str:
    what = f"a profile named {name}" if name else "the default profile"
    return (
        f"Could not find {what}. You may need to add it with "
        f'"dot-dev profile add -n {name or "<name>"} -f {config_file}".'
    )


@dataclass(frozen=True)
class Config:
    default_profile: Profile = field(
        default_factory=lambda: Profile(name=DEFAULT_PROFILE_NAME)
    )
    profiles: Tuple[Profile, ...] = ()

    def __post_init__(self) -> None:
        seen = set()
        for p in self.profiles:
            if p.name == DEFAULT_PROFILE_NAME:
                raise ValidationError(
                    f'Profile name "{DEFAULT_PROFILE_NAME}" is reserved for the default profile.'
                )
            if p.name in seen:
                raise ValidationError(f'Duplicate profile name "{p.name}".')
            seen.add(p.name)

    def profile(self, name: Optional[str]) -> Optional[Profile]:
        """Return the named profile, the default one for ``None``, or ``None``."""
        if name is None or name == DEFAULT_PROFILE_NAME:
            return self.default_profile
        for p in self.profiles:
            if p.name == name:
                return p
        return None

    def require_profile(self, name: Optional[str], config_file: str) -> Profile:
        found = self.profile(name)
        if found is None:
            raise ValidationError(_missing_profile_message(name, config_file))
        return found

    def has_profile(self, name: str) -> bool:
        return self.profile(name) is not None

    def profile_names(self) -> List[str]:
        return [DEFAULT_PROFILE_NAME] + [p.name for p in self.profiles]

    def add_profile(self, profile: Profile) -> "Config":
        if self.has_profile(profile.name):
            raise ValidationError(f'Profile, "{profile.name}", already exists.')
        return replace(self, profiles=self.profiles + (profile,))

    def upsert_profile(self, profile: Profile) -> "Config":
        if profile.name == DEFAULT_PROFILE_NAME:
            return self.update_default_profile(profile)
        if any(p.name == profile.name for p in self.profiles):
            profiles = tuple(
                profile if p.name == profile.name else p for p in self.profiles
            )
        else:
            profiles = self.profiles + (profile,)
        return replace(self, profiles=profiles)

    def update_default_profile(self, profile: Profile) -> "Config":
        return replace(self, default_profile=profile)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_profile": self.default_profile.to_dict(),
            "profiles": [p.to_dict() for p in self.profiles],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        if not isinstance(data, dict):
            raise ValidationError("Config root must be a JSON object.")
        raw_default = data.get("default_profile")
        default = (
            Profile.from_dict(raw_default)
            if raw_default is not None
            else Profile(name=DEFAULT_PROFILE_NAME)
        )
        # The default profile is addressed by position, never by its stored name.
        default = replace(default, name=DEFAULT_PROFILE_NAME)
        raw_profiles = data.get("profiles") or []
        if not isinstance(raw_profiles, list):
            raise ValidationError("Config profiles must be a JSON array.")
        return cls(
            default_profile=default,
            profiles=tuple(Profile.from_dict(p) for p in raw_profiles),
        )


__all__ = [
    "DEFAULT_PROFILE_NAME",
    "EnvironmentVariable",
    "Variable",
    "Group",
    "Definition",
    "definition_from_dict",
    "Profile",
    "Config",
]
