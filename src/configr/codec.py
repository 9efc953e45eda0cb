from __future__ import annotations

import tomllib
from typing import Type, TypeVar

import tomli_w
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def dumps(instance: BaseModel) -> str:
    # TOML has no null, so unset optionals are left out of the document.
    data = instance.model_dump(mode="json", by_alias=True, exclude_none=True)
    return tomli_w.dumps(data)


def loads(text: str, model: Type[ModelT]) -> ModelT:
    data = tomllib.loads(text)
    return model.model_validate(data)


__all__ = ["dumps", "loads"]
