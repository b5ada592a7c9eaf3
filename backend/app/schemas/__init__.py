"""Pydantic schemas for API requests and responses."""

from app.schemas.candy import Candy, CandyCreate

__all__ = [
    "Candy",
    "CandyCreate",
]
