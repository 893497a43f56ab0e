# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

# Member enumeration
from . import accessor, members, type_search
from .binding import INSTANCE_BINDING, STATIC_BINDING, Binding, describe_binding
from .members import FieldInfo, IndexerInfo, MemberInfo, MethodInfo, ParameterInfo, PropertyInfo
from .type_search import ModuleRegistry

# Errors
from .errors import AmbiguousMatchError, AmbiguousTypeNameError, NotFoundError, NullArgumentError, ReflectionError

# Accessors
from .accessor import (
    get_expected_field,
    get_expected_field_or_property,
    get_expected_indexer,
    get_expected_method,
    get_expected_module_type,
    get_expected_property,
    get_expected_type,
    invoke_method,
    invoke_method_with_non_null_args,
    invoke_static_method,
    invoke_static_method_with_non_null_args,
    read_indexer,
    read_member,
    read_static,
    write_indexer,
    write_member,
    write_static,
)


__all__ = [
    "INSTANCE_BINDING",
    "STATIC_BINDING",
    "AmbiguousMatchError",
    "AmbiguousTypeNameError",
    "Binding",
    "FieldInfo",
    "IndexerInfo",
    "MemberInfo",
    "MethodInfo",
    "ModuleRegistry",
    "NotFoundError",
    "NullArgumentError",
    "ParameterInfo",
    "PropertyInfo",
    "ReflectionError",
    "accessor",
    "describe_binding",
    "get_expected_field",
    "get_expected_field_or_property",
    "get_expected_indexer",
    "get_expected_method",
    "get_expected_module_type",
    "get_expected_property",
    "get_expected_type",
    "invoke_method",
    "invoke_method_with_non_null_args",
    "invoke_static_method",
    "invoke_static_method_with_non_null_args",
    "members",
    "read_indexer",
    "read_member",
    "read_static",
    "type_search",
    "write_indexer",
    "write_member",
    "write_static",
]
