# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import pytest

from reflectutil.reflection.binding import INSTANCE_BINDING, STATIC_BINDING, Binding, describe_binding


@pytest.mark.reflection
@pytest.mark.binding
class TestBinding:
    @pytest.mark.parametrize(
        ("binding", "expected"),
        [
            (INSTANCE_BINDING, "[Public|Instance]"),
            (STATIC_BINDING, "[Public|Static]"),
            (Binding.NON_PUBLIC | Binding.STATIC, "[NonPublic|Static]"),
            (Binding.STATIC | Binding.INSTANCE | Binding.NON_PUBLIC | Binding.PUBLIC, "[Public|NonPublic|Instance|Static]"),
        ],
    )
    def test_describe(self, binding, expected):
        assert describe_binding(binding) == expected
        assert binding.describe() == expected

    @pytest.mark.parametrize(
        ("binding", "name", "is_static", "expected"),
        [
            (INSTANCE_BINDING, "value", False, True),
            (INSTANCE_BINDING, "value", True, False),
            (INSTANCE_BINDING, "_value", False, False),
            (STATIC_BINDING, "value", True, True),
            (STATIC_BINDING, "value", False, False),
            (Binding.NON_PUBLIC | Binding.INSTANCE, "_value", False, True),
            (Binding.NON_PUBLIC | Binding.INSTANCE, "value", False, False),
            (Binding.PUBLIC, "value", False, False),
        ],
    )
    def test_matches(self, binding, name, is_static, expected):
        assert binding.matches(name, is_static=is_static) is expected
