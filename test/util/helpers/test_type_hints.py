# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import typing

from typing import ClassVar

import pytest

from frozendict import frozendict

from reflectutil.util.helpers.type_hints import (
    get_own_annotations,
    get_type_hint,
    get_type_hints,
    is_classvar,
    strip_classvar,
    type_name,
)


class _Base:
    base_value: int = 0


class _Sample(_Base):
    required: int
    optional: str | None = None
    shared: ClassVar[list[str]] = []
    pending: Unknown  # noqa: F821 unresolvable on purpose

    def method(self, value: int, other: _Sample) -> bool:
        return True

    @staticmethod
    def static(value: float) -> None:
        pass


@pytest.mark.helpers
@pytest.mark.type_hints
class TestTypeHints:
    def test_get_type_hints_returns_frozendict(self) -> None:
        hints = get_type_hints(_Sample.method)

        assert isinstance(hints, frozendict)
        assert dict(hints) == {"value": int, "other": _Sample, "return": bool}

    def test_get_type_hints_unwraps_staticmethod(self) -> None:
        hints = get_type_hints(_Sample.__dict__["static"])

        assert dict(hints) == {"value": float, "return": type(None)}

    def test_get_type_hints_of_builtin_is_empty(self) -> None:
        assert get_type_hints(len) == frozendict()

    def test_get_type_hint_default(self) -> None:
        assert get_type_hint(_Sample.method, "value") is int
        assert get_type_hint(_Sample.method, "missing", object) is object

    def test_get_own_annotations_excludes_bases(self) -> None:
        annotations = get_own_annotations(_Sample)

        assert set(annotations) == {"required", "optional", "shared", "pending"}
        assert annotations["required"] is int
        assert annotations["optional"] == (str | None)

    def test_get_own_annotations_keeps_forward_refs(self) -> None:
        annotations = get_own_annotations(_Sample)

        assert isinstance(annotations["pending"], typing.ForwardRef)
        assert annotations["pending"].__forward_arg__ == "Unknown"

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [
            (ClassVar, True),
            (ClassVar[int], True),
            ("ClassVar[int]", True),
            ("typing.ClassVar", True),
            (typing.ForwardRef("ClassVar[Foo]"), True),
            (int, False),
            (list[int], False),
            ("int", False),
        ],
    )
    def test_is_classvar(self, hint, expected) -> None:
        assert is_classvar(hint) is expected

    def test_strip_classvar(self) -> None:
        assert strip_classvar(ClassVar[list[str]]) == list[str]
        assert strip_classvar(ClassVar) is object
        assert strip_classvar(int) is int

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [
            (int, "int"),
            (_Sample, "_Sample"),
            (None, "None"),
            (list[int], "list[int]"),
            (int | None, "int | None"),
            (typing.ForwardRef("Later"), "Later"),
            (typing.Any, "Any"),
        ],
    )
    def test_type_name(self, hint, expected) -> None:
        assert type_name(hint) == expected
