"""Data models for parsed arguments and fetch outcomes."""

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field

# Raw issue record as returned by the API; only number, created_at and title are read.
Issue = Dict[str, Any]

HELP: Literal["help"] = "help"


class IssuesQuery(BaseModel):
    """Which project to query and how many of its latest issues to show."""

    user: str
    project: str
    count: int = Field(ge=1)


ParsedArgs = Union[IssuesQuery, Literal["help"]]


class FetchSuccess(BaseModel):
    """API answered 200; payload is the list of issues."""

    kind: Literal["ok"] = "ok"
    status_code: int = 200
    payload: List[Issue]


class FetchFailure(BaseModel):
    """API answered with any other status; payload is the error body."""

    kind: Literal["error"] = "error"
    status_code: int
    payload: Any


FetchResult = Annotated[Union[FetchSuccess, FetchFailure], Field(discriminator="kind")]
