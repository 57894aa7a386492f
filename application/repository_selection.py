import re
from typing import Sequence

from domain.errors import LocalValidationError
from domain.models import Repository


# Apenas inteiros ASCII simples; rejeita "1_0", "1.5" e digitos nao ASCII.
_CHOICE_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_repository_menu(repositories: Sequence[Repository]) -> list[str]:
    return [
        f"{position}) Repo Name: {repository.name}, Full Name: {repository.full_name}"
        for position, repository in enumerate(repositories, start=1)
    ]


def select_repository(repositories: Sequence[Repository], raw_choice: str | None) -> Repository:
    """Map a 1-based menu choice onto ``repositories``."""
    if not repositories:
        raise LocalValidationError("No repositories available to select")

    stripped_choice = (raw_choice or "").strip()
    if not _CHOICE_PATTERN.fullmatch(stripped_choice):
        raise LocalValidationError("Invalid repository number provided")

    choice = int(stripped_choice)
    if choice < 1 or choice > len(repositories):
        raise LocalValidationError("Invalid repository number provided")
    return repositories[choice - 1]
