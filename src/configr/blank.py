"""
Blank instances of configuration models.

Two policies exist for filling a freshly created config file:

- empty: every field holds the empty value of its type ("", 0, False, [], {}...);
  optional fields defaulting to None stay None and are left out of the file
- defaults: fields keep their declared defaults; fields without one get the empty value

Nested models follow the same policy recursively. Models that subclass `configr.Config`
may override `empty()` / `default()` and nested fields will honor the override.
"""

from __future__ import annotations

import enum
import functools
import types
from collections.abc import Mapping, Sequence, Set
from typing import Annotated, Any, Callable, Literal, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)

_SCALAR_PLACEHOLDERS: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    str: "",
    bytes: b"",
}


def blank_producer(model: Type[ModelT], *, use_defaults: bool) -> Callable[[], ModelT]:
    """
    Return the zero-argument factory for `model` under the given policy.

    A model's own `empty` / `default` classmethod wins over the generic field walk.
    """
    factory = getattr(model, "default" if use_defaults else "empty", None)
    if isinstance(factory, types.MethodType) and factory.__self__ is model:
        return factory
    return functools.partial(blank_instance, model, use_defaults=use_defaults)


def _placeholder(annotation: Any, use_defaults: bool) -> Any:
    if annotation is type(None):
        return None

    origin = get_origin(annotation)
    if origin is Annotated:
        return _placeholder(get_args(annotation)[0], use_defaults)
    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        arms = [arm for arm in args if arm is not type(None)]
        if not arms:
            return None
        try:
            return _placeholder(arms[0], use_defaults)
        except TypeError:
            # Optional[X] with no empty X is still representable as None.
            if len(arms) < len(args):
                return None
            raise
    if origin is Literal:
        return get_args(annotation)[0]
    if origin is tuple:
        args = get_args(annotation)
        if args and args[-1] is not Ellipsis:
            return [_placeholder(arg, use_defaults) for arg in args]
        return []
    if origin is not None:
        annotation = origin

    if not isinstance(annotation, type):
        raise TypeError(f"No empty placeholder for type {annotation!r}")

    if issubclass(annotation, BaseModel):
        return blank_producer(annotation, use_defaults=use_defaults)()
    if issubclass(annotation, enum.Enum):
        members = list(annotation)
        if not members:
            raise TypeError(f"Enum {annotation.__name__} has no members")
        return members[0]
    for scalar, value in _SCALAR_PLACEHOLDERS.items():
        if annotation is scalar:
            return value
    if issubclass(annotation, Mapping):
        return {}
    if issubclass(annotation, (Sequence, Set)) and not issubclass(annotation, (str, bytes)):
        return []
    raise TypeError(f"No empty placeholder for type {annotation!r}")


def blank_instance(model: Type[ModelT], *, use_defaults: bool) -> ModelT:
    """
    Build a blank instance of `model` following the empty or defaults policy.

    Raises `TypeError` when a field has a type with no known empty value, and pydantic's
    `ValidationError` when the placeholders violate the field constraints.
    """
    values: dict[str, Any] = {}
    for name, field in model.model_fields.items():
        if use_defaults and not field.is_required():
            continue
        if not field.is_required() and field.default is None:
            values[field.alias or name] = None
            continue
        try:
            values[field.alias or name] = _placeholder(field.annotation, use_defaults)
        except TypeError as e:
            raise TypeError(
                f"No empty placeholder for field '{model.__name__}.{name}' of type {field.annotation!r}"
            ) from e
    return model.model_validate(values)


def empty_instance(model: Type[ModelT]) -> ModelT:
    return blank_instance(model, use_defaults=False)


def default_instance(model: Type[ModelT]) -> ModelT:
    return blank_instance(model, use_defaults=True)


__all__ = ["blank_instance", "blank_producer", "default_instance", "empty_instance"]
