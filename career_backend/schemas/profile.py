"""
Pydantic schemas for the discovery profile.

The discovery flow (outside this service) stores a JSON document in
`profiles.discovery_data`:

    {
        "skills":    {"selected": ["coding"], "additional_info": "..."},
        "values":    {"selected": ["impact"], "additional_info": "..."},
        "interests": {"selected": ["data"],   "additional_info": "..."}
    }

Any facet may be missing, null or partially filled in. These models parse
partial documents into a complete profile with empty facets.
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator


class DiscoveryFacet(BaseModel):
    """One facet of the self-assessment (skills, values or interests)."""
    selected: List[str] = Field(
        default_factory=list,
        description="Tags the user picked, in selection order"
    )
    additional_info: str = Field(
        "",
        description="Optional free-text elaboration (never sent to the model)"
    )

    @field_validator("selected", mode="before")
    @classmethod
    def _selected_as_strings(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        if not isinstance(value, (list, tuple)):
            return [str(value)]
        return [str(tag) for tag in value if tag is not None and str(tag).strip()]

    @field_validator("additional_info", mode="before")
    @classmethod
    def _additional_info_as_string(cls, value: Any) -> str:
        return "" if value is None else str(value)


class DiscoveryProfile(BaseModel):
    """A user's self-assessment profile. Read-only to the pipeline."""
    skills: DiscoveryFacet = Field(default_factory=DiscoveryFacet)
    values: DiscoveryFacet = Field(default_factory=DiscoveryFacet)
    interests: DiscoveryFacet = Field(default_factory=DiscoveryFacet)

    @field_validator("skills", "values", "interests", mode="before")
    @classmethod
    def _missing_facet_is_empty(cls, value: Any) -> Any:
        if value is None:
            return {}
        # A bare list of tags is accepted as the selected list
        if isinstance(value, list):
            return {"selected": value}
        return value
