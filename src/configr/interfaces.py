from __future__ import annotations

from typing import Protocol, Type, TypeVar

from pydantic import BaseModel

from configr.models import ConfigLoadRequest

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigLoader(Protocol):
    """
    Loads a configuration model from its TOML file.

    Implementations resolve the file location from the request, create the file on first
    run and must never overwrite a file that already exists.
    """

    def load(self, model: Type[ModelT], request: ConfigLoadRequest) -> ModelT:
        ...


class BlankFactory(Protocol):
    """Hand-written blank constructors a configuration type may provide."""

    @classmethod
    def empty(cls) -> BaseModel:
        """Every field set to the empty value of its type."""

    @classmethod
    def default(cls) -> BaseModel:
        """Every field set to its declared default."""


__all__ = ["BlankFactory", "ConfigLoader"]
