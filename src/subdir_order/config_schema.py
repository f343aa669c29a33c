from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator


def _clean_dir(v):
    """Accept str or path-like; strip whitespace and backslashes."""
    if v is None:
        return "."
    text = str(v).strip().replace("\\", "/")
    return text or "."


class ProjectConfig(BaseModel):
    kind: Literal["project"] = "project"
    name: str
    directory: str = "."
    references: List[str] = Field(default_factory=list)

    @field_validator("directory", mode="before")
    def _normalize_directory(cls, v):
        return _clean_dir(v)

    @field_validator("references", mode="before")
    def _coerce_references(cls, v):
        # a single reference may be given as a bare string
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class SolutionConfig(BaseModel):
    kind: Literal["solution"] = "solution"
    name: str
    directory: str = "."
    configurations: List[str] = Field(default_factory=list)
    # configuration name -> names of children with build = false
    exclude: Dict[str, List[str]] = Field(default_factory=dict)
    children: List[ChildConfig] = Field(default_factory=list)

    @field_validator("directory", mode="before")
    def _normalize_directory(cls, v):
        return _clean_dir(v)

    @model_validator(mode="after")
    def _check_exclusions(self):
        unknown = set(self.exclude) - set(self.configurations)
        if unknown:
            raise ValueError(
                f"Solution '{self.name}' excludes children from undeclared "
                f"configurations: {', '.join(sorted(unknown))}"
            )
        dups = len(self.configurations) - len(set(self.configurations))
        if dups:
            raise ValueError(f"Solution '{self.name}' declares a configuration twice")
        return self


ChildConfig = Annotated[
    Union[ProjectConfig, SolutionConfig], Field(discriminator="kind")
]

SolutionConfig.model_rebuild()


class ContextConfig(BaseModel):
    """Build-context settings; an empty list enables every configuration."""
    enabled_configurations: List[str] = Field(default_factory=list)


class DescriptionConfig(BaseModel):
    context: ContextConfig = Field(default_factory=ContextConfig)
    solution: SolutionConfig
