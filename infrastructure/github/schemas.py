from pydantic import BaseModel, Field, TypeAdapter


class ErrorBody(BaseModel):
    message: str
    documentation_url: str = ""
    status: int | None = None


class RepositoryPayload(BaseModel):
    name: str = Field(..., min_length=1)
    full_name: str


class CommitPayload(BaseModel):
    sha: str = Field(..., min_length=1)


class BranchPayload(BaseModel):
    name: str
    commit: CommitPayload


class PullRequestPayload(BaseModel):
    number: int | None = None
    html_url: str | None = None


REPOSITORY_LIST = TypeAdapter(list[RepositoryPayload])
