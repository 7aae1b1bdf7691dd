"""Repository modules for database access."""

from repositories.selection_repository import SelectionRepository
from repositories.vote_repository import VoteRepository

__all__ = [
    "SelectionRepository",
    "VoteRepository",
]
