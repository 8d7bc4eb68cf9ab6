"""
ApiPort client models for requests and responses.

Wire names are PascalCase to match the analysis service contract.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from enum import Enum
from typing import Any, ClassVar, NamedTuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_pascal


class WireModel(BaseModel):
    """Base model for everything exchanged with the service."""
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class ResultFormat(str, Enum):
    """Well-known report formats."""
    EXCEL = "Excel"
    JSON = "Json"
    HTML = "HTML"

    @property
    def mime_type(self) -> str:
        return _FORMAT_MIME_TYPES[self]

    @property
    def file_extension(self) -> str:
        return _FORMAT_EXTENSIONS[self]


_FORMAT_MIME_TYPES = {
    ResultFormat.EXCEL: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ResultFormat.JSON: "application/json",
    ResultFormat.HTML: "text/html",
}

_FORMAT_EXTENSIONS = {
    ResultFormat.EXCEL: ".xlsx",
    ResultFormat.JSON: ".json",
    ResultFormat.HTML: ".html",
}


class MemberInfo(WireModel):
    """An API member referenced by the analyzed application."""
    model_config = ConfigDict(frozen=True)

    member_doc_id: str
    type_doc_id: str | None = None
    defined_in_assembly_identity: str | None = None


class AssemblyInfo(WireModel):
    """An assembly descriptor."""
    model_config = ConfigDict(frozen=True)

    assembly_identity: str
    file_version: str | None = None
    location: str | None = None
    target_framework_moniker: str | None = None


class AnalyzeRequest(WireModel):
    """
    Dependency surface of an application, submitted for analysis.

    ``dependencies`` maps each referenced member to the assemblies that use
    it. JSON object keys must be strings, so on the wire the mapping is an
    array of ``{"Key": member, "Value": [assembly, ...]}`` pairs.
    """
    model_config = ConfigDict(frozen=True)

    CURRENT_VERSION: ClassVar[int] = 2

    application_name: str = ""
    dependencies: dict[MemberInfo, frozenset[AssemblyInfo]] = Field(default_factory=dict)
    targets: list[str] = Field(default_factory=list)
    unresolved_assemblies: list[str] = Field(default_factory=list)
    user_assemblies: list[AssemblyInfo] = Field(default_factory=list)
    version: int = CURRENT_VERSION

    @field_validator("dependencies", mode="before")
    @classmethod
    def pairs_to_mapping(cls, value: Any) -> Any:
        """Accept the wire form (list of key/value pairs) as well as a mapping."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return value

        mapping: dict[MemberInfo, Any] = {}
        for pair in value:
            if isinstance(pair, dict):
                key = pair.get("Key", pair.get("key"))
                assemblies = pair.get("Value", pair.get("value"))
            else:
                key, assemblies = pair

            member = key if isinstance(key, MemberInfo) else MemberInfo.model_validate(key)
            if member in mapping:
                raise ValueError(f"Duplicate dependency key: {member.member_doc_id}")
            mapping[member] = assemblies or []

        return mapping

    @field_serializer("dependencies")
    def mapping_to_pairs(
        self,
        dependencies: dict[MemberInfo, frozenset[AssemblyInfo]],
        info: SerializationInfo
    ) -> list[dict[str, Any]]:
        by_alias = bool(info.by_alias)
        return [
            {
                "Key": member.model_dump(by_alias=by_alias),
                "Value": [
                    assembly.model_dump(by_alias=by_alias)
                    for assembly in sorted(assemblies, key=lambda a: a.assembly_identity)
                ],
            }
            for member, assemblies in dependencies.items()
        ]


class AnalyzeResponse(WireModel):
    """Where and how to fetch the report for a finished analysis."""
    result_url: str | None = None
    result_auth_token: str | None = None
    submission_id: str | None = None


class ResultFormatInformation(WireModel):
    """A report representation offered by the service."""
    display_name: str = ""
    mime_type: str = ""
    file_extension: str = ""

    @classmethod
    def from_format(cls, result_format: ResultFormat) -> "ResultFormatInformation":
        return cls(
            display_name=result_format.value,
            mime_type=result_format.mime_type,
            file_extension=result_format.file_extension,
        )


class AvailableTarget(WireModel):
    """A platform the service can analyze against."""
    name: str = ""
    version: str | None = None
    description: str | None = None
    is_set: bool = False

    @property
    def identifier(self) -> str:
        if self.version:
            return f"{self.name}, Version={self.version}"
        return self.name


class ProductInformation(BaseModel):
    """Identity of the calling client, stamped onto every request."""
    model_config = ConfigDict(frozen=True)

    name: str
    version: str

    @field_validator("name", "version")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class ReportResult(NamedTuple):
    """Raw report bytes and the MIME type the service declared for them."""
    data: bytes
    mime_type: str | None
