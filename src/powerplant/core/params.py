"""Class parameterization through subscription.

Fuels, containers and providers take compile-time style parameters the way
generic types do: ``Mixed[Diesel, Uranium]`` or ``InternalCombustion[3]``.
Subscribing creates a subclass carrying the parameters as class attributes.
Each parameter tuple produces exactly one class, so repeated subscriptions
return the same object and instances of it compare and ``isinstance``-check
as expected.
"""

from typing import Any

_specializations: dict[tuple[type, tuple[Any, ...]], type] = {}


def param_name(param: Any) -> str:
    """Readable name of a parameter for the generated class name."""
    if isinstance(param, type):
        return param.__qualname__
    return repr(param)


def specialize(
    base: type,
    params: tuple[Any, ...],
    attrs: dict[str, Any] | None = None,
    extra_bases: tuple[type, ...] = (),
) -> type:
    """Return the subclass of ``base`` bound to ``params``.

    Args:
        base: Class being parameterized.
        params: Parameter values; must be hashable.
        attrs: Class attributes set on the new subclass.
        extra_bases: Additional base classes (e.g. marker mixins).

    Returns:
        The cached subclass for this ``(base, params)`` pair.
    """
    key = (base, params)
    cls = _specializations.get(key)
    if cls is None:
        name = f"{base.__name__}[{', '.join(param_name(p) for p in params)}]"
        namespace = {
            "__module__": base.__module__,
            "__qualname__": name,
            "_params": params,
            **(attrs or {}),
        }
        cls = type(base)(name, (base, *extra_bases), namespace)
        _specializations[key] = cls
    return cls


def as_params(item: Any) -> tuple[Any, ...]:
    """Normalize a subscription argument to a tuple."""
    return item if isinstance(item, tuple) else (item,)
