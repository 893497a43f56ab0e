# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Name based access to types and their members.

Each helper looks a type or member up by name and either returns its descriptor, reads or writes its value, or
invokes it. Unlike :mod:`~reflectutil.reflection.members`, a missing type or member is never answered with ``None``:

* :class:`~reflectutil.reflection.errors.NotFoundError` when nothing matches the name and binding,
* :class:`~reflectutil.reflection.errors.AmbiguousTypeNameError` when several loaded modules define the type name,
* :class:`~reflectutil.reflection.errors.NullArgumentError` when arguments used to infer a signature are ``None``.

Errors raised by the invoked code, by Python while reading or writing a value, and
:class:`~reflectutil.reflection.errors.AmbiguousMatchError` for overloaded names invoked without types all propagate
unchanged.

Examples
--------
    >>> from reflectutil.reflection import accessor
    >>> class Counter:
    ...     total: int = 0
    ...     def add(self, amount: int) -> int:
    ...         self.total += amount
    ...         return self.total
    >>> counter = Counter()
    >>> accessor.write_member(counter, "total", 5)
    >>> accessor.invoke_method(counter, "add", 2)
    7
    >>> accessor.read_member(counter, "count")
    Traceback (most recent call last):
    ...
    reflectutil.reflection.errors.NotFoundError: Type 'Counter' has no field or property named 'count' for binding [Public|Instance].

"""

from typing import TYPE_CHECKING, Any

from ..util.logging import getLogger
from . import members, type_search
from .binding import INSTANCE_BINDING, STATIC_BINDING, Binding
from .errors import AmbiguousTypeNameError, NotFoundError, NullArgumentError


if TYPE_CHECKING:
    import types

    from collections.abc import Iterable, Sequence

    from .members import FieldInfo, IndexerInfo, MethodInfo, PropertyInfo


LOG = getLogger(__name__)


def _not_found(msg: str, *, cls: type | None = None, type_name: str | None = None, member_name: str | None = None, binding: Binding | None = None) -> NotFoundError:
    LOG.debug(msg)
    if type_name is None and cls is not None:
        type_name = cls.__name__
    return NotFoundError(msg, type_name=type_name, member_name=member_name, binding=binding)


# MARK: Type search
def get_expected_type(type_name: str, modules: Iterable[types.ModuleType] | None = None) -> type:
    """Return the only class called *type_name* among *modules* (by default, every loaded module).

    Raises:
        NotFoundError: If no module defines the type.
        AmbiguousTypeNameError: If more than one module defines the type.

    """
    found = type_search.find_types(type_name, modules)

    if len(found) > 1:
        msg = f"More than one type named '{type_name}' in loaded modules."
        LOG.debug("%s Candidates: %s", msg, ", ".join(typ.__module__ for typ in found))
        raise AmbiguousTypeNameError(msg, type_name=type_name, modules=[typ.__module__ for typ in found])

    if not found:
        msg = f"Type '{type_name}' not found in any loaded module."
        raise _not_found(msg, type_name=type_name)

    return found[0]


def get_expected_module_type(module: types.ModuleType, type_name: str) -> type:
    """Return the class called *type_name* defined by *module*.

    Raises:
        NotFoundError: If the module does not define the type.

    """
    typ = type_search.find_module_type(module, type_name)
    if typ is None:
        msg = f"Type '{type_name}' not found in module '{module.__name__}'."
        raise _not_found(msg, type_name=type_name)
    return typ


# MARK: Type member search
def get_expected_field(cls: type, field_name: str, binding: Binding = INSTANCE_BINDING) -> FieldInfo:
    field = members.get_field(cls, field_name, binding)
    if field is None:
        msg = f"Type '{cls.__name__}' has no field named '{field_name}' for binding {binding.describe()}."
        raise _not_found(msg, cls=cls, member_name=field_name, binding=binding)
    return field


def get_expected_property(cls: type, property_name: str, binding: Binding = INSTANCE_BINDING) -> PropertyInfo:
    prop = members.get_property(cls, property_name, binding)
    if prop is None:
        msg = f"Type '{cls.__name__}' has no property named '{property_name}' for binding {binding.describe()}."
        raise _not_found(msg, cls=cls, member_name=property_name, binding=binding)
    return prop


def get_expected_field_or_property(cls: type, name: str, binding: Binding = INSTANCE_BINDING) -> FieldInfo | PropertyInfo:
    """Return the field called *name*, or failing that the property called *name*."""
    if (field := members.get_field(cls, name, binding)) is not None:
        return field
    if (prop := members.get_property(cls, name, binding)) is not None:
        return prop

    msg = f"Type '{cls.__name__}' has no field or property named '{name}' for binding {binding.describe()}."
    raise _not_found(msg, cls=cls, member_name=name, binding=binding)


def get_expected_indexer(cls: type) -> IndexerInfo:
    indexer = members.get_indexer(cls)
    if indexer is None:
        msg = f"Type '{cls.__name__}' has no indexer property."
        raise _not_found(msg, cls=cls)
    return indexer


def get_expected_method(cls: type, method_name: str, types: Sequence[Any] | None = None, binding: Binding = INSTANCE_BINDING) -> MethodInfo:
    """Return the method called *method_name*.

    Without *types* the name alone selects the method, and an overloaded name raises
    :class:`~reflectutil.reflection.errors.AmbiguousMatchError`. With *types* (possibly empty) only the method or overload
    whose parameter types are exactly *types* matches.

    Raises:
        NotFoundError: If no method matches.

    """
    if types is None:
        method = members.get_method(cls, method_name, binding)
        if method is None:
            msg = f"Method '{cls.__name__}.{method_name}' not found for binding {binding.describe()}."
            raise _not_found(msg, cls=cls, member_name=method_name, binding=binding)
        return method

    method = members.get_method_by_signature(cls, method_name, types, binding)
    if method is None:
        msg = f"Method '{cls.__name__}.{members.format_signature(method_name, types)}' not found for binding {binding.describe()}."
        raise _not_found(msg, cls=cls, member_name=method_name, binding=binding)
    return method


# MARK: Static (class) access
def read_static(cls: type, name: str) -> Any:
    """Return the value of the static field or property called *name*."""
    return get_expected_field_or_property(cls, name, STATIC_BINDING).get_value(None)


def write_static(cls: type, name: str, value: Any) -> None:
    """Set the value of the static field or property called *name*."""
    get_expected_field_or_property(cls, name, STATIC_BINDING).set_value(None, value)


def invoke_static_method(cls: type, method_name: str, *args: Any, types: Sequence[Any] | None = None) -> Any:
    """Invoke the static or class method called *method_name* with *args*.

    Without *types* the method is selected by name only, which fails for overloaded names. With *types* the overload
    whose parameter types are exactly *types* is invoked.
    """
    method = get_expected_method(cls, method_name, types, STATIC_BINDING)
    LOG.debug("Invoking %r", method)
    return method.invoke(None, *args)


def invoke_static_method_with_non_null_args(cls: type, method_name: str, *args: Any) -> Any:
    """Invoke the static or class method whose parameter types are the runtime types of *args*.

    Raises:
        NullArgumentError: If any argument is ``None``, before any lookup takes place.

    """
    return _invoke_with_non_null_args(cls, None, method_name, STATIC_BINDING, args)


# MARK: Object (instance) access
def read_member(instance: Any, name: str) -> Any:
    """Return the value of the field or property called *name* of *instance*.

    Only members declared on the class are found: annotated fields, slots and properties. Attributes that are only
    assigned in ``__init__`` (or elsewhere at runtime) without a class-level annotation raise :class:`NotFoundError`.
    """
    return get_expected_field_or_property(type(instance), name, INSTANCE_BINDING).get_value(instance)


def write_member(instance: Any, name: str, value: Any) -> None:
    """Set the value of the field or property called *name* of *instance*.

    As with :func:`read_member`, the member must be declared on the class.
    """
    get_expected_field_or_property(type(instance), name, INSTANCE_BINDING).set_value(instance, value)


def read_indexer(instance: Any, *indexes: Any) -> Any:
    """Return ``instance[indexes]``."""
    return get_expected_indexer(type(instance)).get_value(instance, *indexes)


def write_indexer(instance: Any, value: Any, *indexes: Any) -> None:
    """Set ``instance[indexes] = value``."""
    get_expected_indexer(type(instance)).set_value(instance, value, *indexes)


def invoke_method(instance: Any, method_name: str, *args: Any, types: Sequence[Any] | None = None) -> Any:
    """Invoke the instance method called *method_name* on *instance* with *args*.

    Selecting by name only is the easiest variant, but cannot be used when the method is overloaded. Passing *types* is
    the most precise variant: the overload whose parameter types are exactly *types* is invoked.
    """
    method = get_expected_method(type(instance), method_name, types, INSTANCE_BINDING)
    LOG.debug("Invoking %r", method)
    return method.invoke(instance, *args)


def invoke_method_with_non_null_args(instance: Any, method_name: str, *args: Any) -> Any:
    """Invoke the instance method whose parameter types are the runtime types of *args*.

    This selects between overloads with the same number of parameters, as long as every argument is non-``None``.

    Raises:
        NullArgumentError: If any argument is ``None``, before any lookup takes place.

    """
    return _invoke_with_non_null_args(type(instance), instance, method_name, INSTANCE_BINDING, args)


def _invoke_with_non_null_args(cls: type, instance: Any, method_name: str, binding: Binding, args: Sequence[Any]) -> Any:
    for index, arg in enumerate(args):
        if arg is None:
            msg = "All arguments must be non-None."
            LOG.debug("%s Argument %d of '%s.%s' is None", msg, index, cls.__name__, method_name)
            raise NullArgumentError(msg, index=index)

    types = [type(arg) for arg in args]
    method = get_expected_method(cls, method_name, types, binding)
    LOG.debug("Invoking %r", method)
    return method.invoke(instance, *args)
