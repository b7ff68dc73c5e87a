"""Pydantic models for the GraphQL response envelope."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GraphQLBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ErrorLocation(GraphQLBaseModel):
    line: int
    column: int


class ErrorExtensions(GraphQLBaseModel):
    field: str | None = None
    argument: str | None = None
    value: str | None = None
    allowed_values: list[str] = Field(default_factory=list, alias="allowed-values")
    enum_type: str | None = Field(default=None, alias="enum-type")


class ResponseError(GraphQLBaseModel):
    """One out-of-band error reported by the GraphQL server."""

    message: str
    locations: list[ErrorLocation] = Field(default_factory=list["ErrorLocation"])
    extensions: ErrorExtensions | None = None


class GraphQLResponse(GraphQLBaseModel):
    data: dict[str, object] | None = None
    errors: list[ResponseError] = Field(default_factory=list["ResponseError"])


def join_error_messages(errors: list[ResponseError]) -> str:
    return "\n".join(error.message for error in errors)
