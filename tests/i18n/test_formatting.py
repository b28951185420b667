# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for positional placeholder substitution."""

from __future__ import annotations

import pytest

from lingofly.i18n.formatting import format_message, placeholder_indexes, validate_template


class TestFormatMessage:
    def test_single_argument(self):
        assert format_message("Hello {0}", ["Ada"]) == "Hello Ada"

    def test_multiple_arguments_keep_order(self):
        template = "Hello {0}, you are {1} years old and you live in {2}"
        result = format_message(template, ["John", "30", "Oakland"])
        assert result == "Hello John, you are 30 years old and you live in Oakland"

    def test_out_of_order_placeholders(self):
        assert format_message("{1} before {0}", ("a", "b")) == "b before a"

    def test_repeated_placeholder(self):
        assert format_message("{0} and {0}", ("x",)) == "x and x"

    def test_missing_argument_left_literal(self):
        assert format_message("Hello {0}, meet {1}", ["Ada"]) == "Hello Ada, meet {1}"

    def test_no_arguments_returns_template(self):
        assert format_message("Hello {0}") == "Hello {0}"

    def test_extra_arguments_ignored(self):
        assert format_message("Hello {0}", ["Ada", "Grace", "Linus"]) == "Hello Ada"

    def test_non_string_arguments_converted(self):
        assert format_message("{0} is {1}", (42, None)) == "42 is None"

    def test_argument_text_is_not_expanded(self):
        assert format_message("{0} {1}", ("{1}", "x")) == "{1} x"

    def test_non_numeric_braces_untouched(self):
        assert format_message("{name} {} {0}", ("a",)) == "{name} {} a"


class TestPlaceholderIndexes:
    def test_collects_indexes(self):
        assert placeholder_indexes("{2} {0} {2}") == {0, 2}

    def test_no_placeholders(self):
        assert placeholder_indexes("plain") == set()


class TestValidateTemplate:
    @pytest.mark.parametrize("template", ["Hello", "Hello {0}", "{10}", "{} and {name}", "{0}{1}"])
    def test_accepts_well_formed(self, template):
        validate_template(template)

    @pytest.mark.parametrize("template", ["Hello {0", "Hello {", "{12 apples}", "{0} {1"])
    def test_rejects_unterminated(self, template):
        with pytest.raises(ValueError, match="unterminated placeholder"):
            validate_template(template)
