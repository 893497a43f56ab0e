# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Member enumeration for Python classes.

This module is the introspection layer the accessor helpers are built on. It maps the Python data model onto four kinds
of member descriptors:

* :class:`FieldInfo` for data attributes. Annotated attributes and ``__slots__`` entries are instance fields, while
  ``ClassVar`` annotated or plain (un-annotated) class attributes are static fields.
* :class:`PropertyInfo` for :class:`property` and :func:`functools.cached_property` (instance), and for
  :func:`~reflectutil.util.helpers.classproperty` or properties declared on the metaclass (static).
* :class:`IndexerInfo` for ``__getitem__``/``__setitem__``.
* :class:`MethodInfo` for functions (instance), and :class:`staticmethod`/:class:`classmethod` (static). A function with
  :func:`typing.overload` declarations produces one :class:`MethodInfo` per declaration.

Like the runtime it wraps, the lookup functions here answer "absent" with ``None``. The only error they raise on their
own is :class:`~reflectutil.reflection.errors.AmbiguousMatchError`, when a method is requested by name alone and that
name is overloaded. Nothing is cached: every call inspects the class again.

Examples
--------
    >>> from reflectutil.reflection import members
    >>> class Point:
    ...     x: int = 0
    ...     origin_count = 0
    ...     def shift(self, dx: int) -> None:
    ...         self.x += dx
    >>> members.get_field(Point, "x")
    FieldInfo(Point.x: int)
    >>> members.get_field(Point, "origin_count") is None
    True
    >>> members.get_field(Point, "origin_count", members.STATIC_BINDING)
    FieldInfo(static Point.origin_count: object)
    >>> members.get_method(Point, "shift").signature
    'shift(int)'

"""

import annotationlib
import dataclasses
import functools
import inspect
import types
import typing

from typing import TYPE_CHECKING, Any, ClassVar, override

from ..util.helpers import mro, type_hints
from ..util.helpers.classproperty import ClassPropertyDescriptor
from .binding import INSTANCE_BINDING, STATIC_BINDING, Binding
from .errors import AmbiguousMatchError


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence


__all__ = [
    "INSTANCE_BINDING",
    "STATIC_BINDING",
    "FieldInfo",
    "IndexerInfo",
    "MemberInfo",
    "MethodInfo",
    "ParameterInfo",
    "PropertyInfo",
    "get_field",
    "get_fields",
    "get_indexer",
    "get_members",
    "get_method",
    "get_method_by_signature",
    "get_methods",
    "get_properties",
    "get_property",
]


VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


# MARK: Parameters
class ParameterInfo(typing.NamedTuple):
    """A parameter of a method or indexer, excluding the receiver (``self``/``cls``)."""

    #: Zero-based position of the parameter, not counting the receiver.
    position: int
    #: Declared parameter name.
    name: str
    #: Resolved annotation, or ``object`` when the parameter is unannotated.
    parameter_type: Any
    #: Parameter kind as reported by :mod:`inspect`.
    kind: inspect._ParameterKind
    #: Default value, or :attr:`inspect.Parameter.empty`.
    default: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty

    @property
    def variadic(self) -> bool:
        """Whether this is a ``*args`` or ``**kwargs`` parameter."""
        return self.kind in VARIADIC_KINDS

    @override
    def __str__(self) -> str:
        return f"{self.name}: {type_hints.type_name(self.parameter_type)}"


def _signature_parameters(function: Callable[..., Any], *, skip_receiver: bool) -> tuple[ParameterInfo, ...]:
    function = getattr(function, "__func__", function)
    try:
        signature = inspect.signature(function, annotation_format=annotationlib.Format.FORWARDREF)
    except (TypeError, ValueError):
        # Some builtins do not expose a signature
        return ()

    hints = type_hints.get_type_hints(function)
    parameters = list(signature.parameters.values())
    if skip_receiver and parameters and parameters[0].kind not in (*VARIADIC_KINDS, inspect.Parameter.KEYWORD_ONLY):
        parameters = parameters[1:]

    return tuple(
        ParameterInfo(position=position, name=parameter.name, parameter_type=hints.get(parameter.name, object), kind=parameter.kind, default=parameter.default)
        for position, parameter in enumerate(parameters)
    )


# MARK: Member descriptors
@dataclasses.dataclass(slots=True, frozen=True)
class MemberInfo:
    """Common base of all member descriptors."""

    #: Human readable member kind, used in messages.
    kind: ClassVar[str] = "member"

    #: Member name.
    name: str
    #: Class that declares the member (for metaclass properties, the metaclass).
    declaring_type: type
    #: Class the member was looked up on: the declaring type or one of its subclasses.
    reflected_type: type
    #: Whether the member belongs to the class rather than to its instances.
    is_static: bool

    @property
    def qualified_name(self) -> str:
        return f"{self.reflected_type.__name__}.{self.name}"

    def _require_instance(self, instance: Any) -> None:
        if not self.is_static and instance is None:
            msg = f"Non-static {self.kind} '{self.qualified_name}' requires an instance"
            raise TypeError(msg)


@dataclasses.dataclass(slots=True, frozen=True)
class FieldInfo(MemberInfo):
    """A data attribute."""

    kind: ClassVar[str] = "field"

    #: Declared type, or ``object`` when the field is unannotated.
    field_type: Any

    def get_value(self, instance: Any = None) -> Any:
        """Return the field value of *instance*, or of the class for static fields."""
        if self.is_static:
            return getattr(self.reflected_type, self.name)
        self._require_instance(instance)
        return getattr(instance, self.name)

    def set_value(self, instance: Any, value: Any) -> None:
        """Set the field on *instance*. Static fields ignore *instance* and are written on their declaring class."""
        if self.is_static:
            setattr(self.declaring_type, self.name, value)
            return
        self._require_instance(instance)
        setattr(instance, self.name, value)

    @override
    def __repr__(self) -> str:
        return f"FieldInfo({'static ' if self.is_static else ''}{self.qualified_name}: {type_hints.type_name(self.field_type)})"


@dataclasses.dataclass(slots=True, frozen=True)
class PropertyInfo(MemberInfo):
    """A computed attribute backed by a descriptor."""

    kind: ClassVar[str] = "property"

    #: The descriptor object (``property``, ``cached_property`` or ``ClassPropertyDescriptor``).
    descriptor: Any
    #: Return annotation of the getter, or ``object`` when unannotated.
    property_type: Any
    #: Whether the property is declared on the metaclass of :attr:`reflected_type`.
    on_metaclass: bool = False

    @property
    def can_read(self) -> bool:
        descriptor = self.descriptor
        if isinstance(descriptor, ClassPropertyDescriptor):
            return True
        if isinstance(descriptor, property):
            return descriptor.fget is not None
        return True

    @property
    def can_write(self) -> bool:
        descriptor = self.descriptor
        if isinstance(descriptor, ClassPropertyDescriptor):
            return descriptor.writable
        if isinstance(descriptor, property):
            return descriptor.fset is not None
        return True

    def get_value(self, instance: Any = None) -> Any:
        if self.is_static:
            return getattr(self.reflected_type, self.name)
        self._require_instance(instance)
        return getattr(instance, self.name)

    def set_value(self, instance: Any, value: Any) -> None:
        """Set the property on *instance*, or on the class for static properties.

        Read-only properties raise :class:`AttributeError`, as a plain assignment would.
        """
        if not self.is_static:
            self._require_instance(instance)
            setattr(instance, self.name, value)
        elif isinstance(self.descriptor, ClassPropertyDescriptor):
            self.descriptor.set_class_value(self.reflected_type, value)
        else:
            setattr(self.reflected_type, self.name, value)

    @override
    def __repr__(self) -> str:
        return f"PropertyInfo({'static ' if self.is_static else ''}{self.qualified_name}: {type_hints.type_name(self.property_type)})"


@dataclasses.dataclass(slots=True, frozen=True)
class IndexerInfo(MemberInfo):
    """Item access (``obj[index]``) through ``__getitem__``/``__setitem__``.

    Several indexes are combined into a tuple key, so ``get_value(obj, 1, 2)`` reads ``obj[1, 2]``.
    """

    kind: ClassVar[str] = "indexer"

    #: ``__getitem__`` implementation, or ``None`` for write-only indexers.
    getter: Any
    #: ``__setitem__`` implementation, or ``None`` for read-only indexers.
    setter: Any
    #: Index parameters of the getter (or setter, minus the value, when there is no getter).
    index_parameters: tuple[ParameterInfo, ...]
    #: Return annotation of the getter, or ``object``.
    value_type: Any

    @property
    def can_read(self) -> bool:
        return self.getter is not None

    @property
    def can_write(self) -> bool:
        return self.setter is not None

    @staticmethod
    def _key(indexes: Sequence[Any]) -> Any:
        if not indexes:
            msg = "An indexer requires at least one index"
            raise TypeError(msg)
        return indexes[0] if len(indexes) == 1 else tuple(indexes)

    def get_value(self, instance: Any, *indexes: Any) -> Any:
        self._require_instance(instance)
        return instance[self._key(indexes)]

    def set_value(self, instance: Any, value: Any, *indexes: Any) -> None:
        self._require_instance(instance)
        instance[self._key(indexes)] = value

    @override
    def __repr__(self) -> str:
        indexes = ", ".join(str(parameter) for parameter in self.index_parameters)
        return f"IndexerInfo({self.reflected_type.__name__}[{indexes}]: {type_hints.type_name(self.value_type)})"


@dataclasses.dataclass(slots=True, frozen=True)
class MethodInfo(MemberInfo):
    """A method, or one :func:`typing.overload` declaration of an overloaded method.

    Every overload of a method shares the runtime implementation; :attr:`signature_source` tells them apart.
    """

    kind: ClassVar[str] = "method"

    #: Raw class namespace entry: a function, ``staticmethod`` or ``classmethod``.
    descriptor: Any
    #: Function whose signature describes this method: the implementation, or one of its overload declarations.
    signature_source: Callable[..., Any]
    #: Parameters, excluding the receiver.
    parameters: tuple[ParameterInfo, ...]
    #: Return annotation, or ``object`` when unannotated.
    return_type: Any

    @property
    def function(self) -> Callable[..., Any]:
        """The runtime implementation."""
        return getattr(self.descriptor, "__func__", self.descriptor)

    @property
    def is_overload(self) -> bool:
        return self.signature_source is not self.function

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        """Types of the non-variadic parameters, in order."""
        return tuple(parameter.parameter_type for parameter in self.parameters if not parameter.variadic)

    @property
    def signature(self) -> str:
        """Pseudo-signature such as ``name(int,str)``."""
        return format_signature(self.name, self.parameter_types)

    def matches(self, types: Sequence[Any]) -> bool:
        """Whether the parameter types are exactly *types*, element by element.

        No subclass or assignability matching is done: ``bool`` does not match an ``int`` parameter.
        """
        own = self.parameter_types
        types = tuple(types)
        return len(own) == len(types) and all(mine == theirs for mine, theirs in zip(own, types, strict=True))

    def invoke(self, instance: Any = None, *args: Any) -> Any:
        """Call the method with positional *args* and return its result.

        Static and class methods ignore *instance*; class methods receive :attr:`reflected_type`.
        """
        self._require_instance(instance)
        bound = self.descriptor.__get__(None if self.is_static else instance, self.reflected_type)
        return bound(*args)

    @override
    def __repr__(self) -> str:
        return f"MethodInfo({'static ' if self.is_static else ''}{self.reflected_type.__name__}.{self.signature} -> {type_hints.type_name(self.return_type)})"


def format_signature(name: str, types: Sequence[Any]) -> str:
    return f"{name}({','.join(type_hints.type_name(typ) for typ in types)})"


# MARK: Classification
def _ensure_type(cls: Any) -> type:
    if not isinstance(cls, type):
        msg = f"Expected a type, got {type(cls).__name__}"
        raise TypeError(msg)
    return cls


def _property_info(cls: type, owner: type, name: str, descriptor: Any, *, is_static: bool, on_metaclass: bool = False) -> PropertyInfo:
    if isinstance(descriptor, ClassPropertyDescriptor):
        getter = descriptor.getter_function
    elif isinstance(descriptor, property):
        getter = descriptor.fget
    else:
        getter = getattr(descriptor, "func", None)

    property_type = type_hints.get_type_hint(getter, "return", object) if getter is not None else object
    return PropertyInfo(
        name=name, declaring_type=owner, reflected_type=cls, is_static=is_static, descriptor=descriptor, property_type=property_type, on_metaclass=on_metaclass
    )


def _method_infos(cls: type, owner: type, name: str, descriptor: Any, *, is_static: bool) -> tuple[MethodInfo, ...]:
    function = getattr(descriptor, "__func__", descriptor)
    skip_receiver = not isinstance(descriptor, staticmethod)

    sources = [getattr(overload, "__func__", overload) for overload in typing.get_overloads(function)] or [function]

    return tuple(
        MethodInfo(
            name=name,
            declaring_type=owner,
            reflected_type=cls,
            is_static=is_static,
            descriptor=descriptor,
            signature_source=source,
            parameters=_signature_parameters(source, skip_receiver=skip_receiver),
            return_type=type_hints.get_type_hint(source, "return", object),
        )
        for source in sources
    )


def _is_descriptor(value: Any) -> bool:
    return hasattr(type(value), "__get__") or hasattr(type(value), "__set__")


def _describe(cls: type, name: str, declaration: mro.Declaration) -> tuple[MemberInfo, ...]:
    owner, value = declaration.owner, declaration.value
    annotation, has_annotation = declaration.annotation, declaration.has_annotation
    if declaration.has_value and not has_annotation:
        # A bare value may re-default a field annotated further up the MRO
        inherited = mro.find_annotation(cls, name)
        if inherited is not None:
            annotation, has_annotation = inherited.annotation, True

    if declaration.has_value:
        # Order matters: ClassPropertyDescriptor extends property
        if isinstance(value, ClassPropertyDescriptor):
            return (_property_info(cls, owner, name, value, is_static=True),)
        if isinstance(value, (property, functools.cached_property)):
            return (_property_info(cls, owner, name, value, is_static=False),)
        if isinstance(value, (staticmethod, classmethod)):
            if not inspect.isfunction(value.__func__):
                return ()
            return _method_infos(cls, owner, name, value, is_static=True)
        if inspect.isfunction(value):
            return _method_infos(cls, owner, name, value, is_static=False)
        if isinstance(value, types.MemberDescriptorType):
            field_type = annotation if has_annotation else object
            return (FieldInfo(name=name, declaring_type=owner, reflected_type=cls, is_static=False, field_type=field_type),)
        if isinstance(value, type) or _is_descriptor(value):
            # Nested classes and other descriptors are neither fields nor methods
            return ()

    if has_annotation:
        is_static = type_hints.is_classvar(annotation)
        field_type = type_hints.strip_classvar(annotation) if is_static else annotation
        return (FieldInfo(name=name, declaring_type=owner, reflected_type=cls, is_static=is_static, field_type=field_type),)

    return (FieldInfo(name=name, declaring_type=owner, reflected_type=cls, is_static=True, field_type=object),)


def _metaclass_property(cls: type, name: str) -> PropertyInfo | None:
    declaration = mro.find_declaration(type(cls), name)
    if declaration is None or not isinstance(declaration.value, property):
        return None
    return _property_info(cls, declaration.owner, name, declaration.value, is_static=True, on_metaclass=True)


def _lookup(cls: type, name: str) -> tuple[MemberInfo, ...]:
    declaration = mro.find_declaration(cls, name)
    members = () if declaration is None else _describe(cls, name, declaration)

    # Data descriptors on the metaclass shadow the class namespace for class access, as in type.__getattribute__.
    # Instances never see metaclass attributes, so instance members declared on the class remain.
    if (info := _metaclass_property(cls, name)) is not None:
        return (info, *(member for member in members if not member.is_static))
    return members


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _iter_members(cls: type) -> Iterator[MemberInfo]:
    names = dict.fromkeys(
        (
            *(name for name, value in _metaclass_namespace(cls) if isinstance(value, property)),
            *mro.iter_declared_names(cls),
        )
    )
    for name in names:
        # Special names (__module__, __annotate__, __init__, ...) are only reachable through named lookups
        if _is_dunder(name):
            continue
        yield from _lookup(cls, name)


def _metaclass_namespace(cls: type) -> Iterator[tuple[str, Any]]:
    for klass in mro.iter_mro(type(cls)):
        yield from vars(klass).items()


# MARK: Enumeration
def get_members(cls: type, binding: Binding = INSTANCE_BINDING) -> tuple[MemberInfo, ...]:
    """Return every member of *cls* selected by *binding*, nearest declaration first."""
    cls = _ensure_type(cls)
    return tuple(member for member in _iter_members(cls) if binding.matches(member.name, is_static=member.is_static))


def _get_named[M: MemberInfo](cls: type, name: str, binding: Binding, kind: type[M]) -> tuple[M, ...]:
    cls = _ensure_type(cls)
    return tuple(member for member in _lookup(cls, name) if isinstance(member, kind) and binding.matches(member.name, is_static=member.is_static))


def get_fields(cls: type, binding: Binding = INSTANCE_BINDING) -> tuple[FieldInfo, ...]:
    return tuple(member for member in get_members(cls, binding) if isinstance(member, FieldInfo))


def get_field(cls: type, name: str, binding: Binding = INSTANCE_BINDING) -> FieldInfo | None:
    fields = _get_named(cls, name, binding, FieldInfo)
    return fields[0] if fields else None


def get_properties(cls: type, binding: Binding = INSTANCE_BINDING) -> tuple[PropertyInfo, ...]:
    return tuple(member for member in get_members(cls, binding) if isinstance(member, PropertyInfo))


def get_property(cls: type, name: str, binding: Binding = INSTANCE_BINDING) -> PropertyInfo | None:
    properties = _get_named(cls, name, binding, PropertyInfo)
    return properties[0] if properties else None


def get_indexer(cls: type) -> IndexerInfo | None:
    """Return the indexer of *cls*, or ``None`` if it defines neither ``__getitem__`` nor ``__setitem__``."""
    cls = _ensure_type(cls)

    getter = mro.find_declaration(cls, "__getitem__")
    setter = mro.find_declaration(cls, "__setitem__")
    # Assigning None explicitly disables item access
    if getter is not None and getter.value is None:
        getter = None
    if setter is not None and setter.value is None:
        setter = None
    if getter is None and setter is None:
        return None

    if getter is not None:
        owner = getter.owner
        index_parameters = _signature_parameters(getter.value, skip_receiver=True)
        value_type = type_hints.get_type_hint(getter.value, "return", object)
    else:
        assert setter is not None
        owner = setter.owner
        index_parameters = _signature_parameters(setter.value, skip_receiver=True)[:-1]
        value_type = object

    return IndexerInfo(
        name="__getitem__" if getter is not None else "__setitem__",
        declaring_type=owner,
        reflected_type=cls,
        is_static=False,
        getter=None if getter is None else getter.value,
        setter=None if setter is None else setter.value,
        index_parameters=index_parameters,
        value_type=value_type,
    )


def get_methods(cls: type, binding: Binding = INSTANCE_BINDING) -> tuple[MethodInfo, ...]:
    return tuple(member for member in get_members(cls, binding) if isinstance(member, MethodInfo))


def get_method(cls: type, name: str, binding: Binding = INSTANCE_BINDING) -> MethodInfo | None:
    """Return the method called *name*, or ``None``.

    Raises:
        AmbiguousMatchError: If *name* has more than one overload.

    """
    methods = _get_named(cls, name, binding, MethodInfo)
    if len(methods) > 1:
        msg = f"Ambiguous match found for '{cls.__name__}.{name}': {', '.join(method.signature for method in methods)}"
        raise AmbiguousMatchError(msg)
    return methods[0] if methods else None


def get_method_by_signature(cls: type, name: str, types: Sequence[Any], binding: Binding = INSTANCE_BINDING) -> MethodInfo | None:
    """Return the method (or overload) called *name* whose parameter types are exactly *types*, or ``None``."""
    for method in _get_named(cls, name, binding, MethodInfo):
        if method.matches(types):
            return method
    return None
