from dataclasses import dataclass


@dataclass(frozen=True)
class Repository:
    name: str
    full_name: str


@dataclass(frozen=True)
class Branch:
    name: str
    head_commit_sha: str
