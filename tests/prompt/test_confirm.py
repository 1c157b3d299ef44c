"""Tests for Prompt.confirm: yes/no resolution."""

import io

import pytest

from conftest import make_prompt
from lineprompt.errors import EmptyInputError, ValidationFailedError
from lineprompt.options import InputOptions


@pytest.mark.unit
class TestConfirmAffirmative:

    @pytest.mark.parametrize("answer", ["yes\n", "y\n", "  yes  \n"])
    def test_yes_answers_are_true(self, answer):
        p = make_prompt(answer, policy=None)
        assert p.confirm("Do you agree?") is True

    def test_default_yes_on_empty_input(self):
        p = make_prompt("\n")
        assert p.confirm("Do you confirm these changes", InputOptions(default="yes")) is True


@pytest.mark.unit
class TestConfirmNegative:

    def test_default_no_on_empty_input(self):
        p = make_prompt("\n", policy=None)
        assert p.confirm("Do you agree?", InputOptions(default="no")) is False

    def test_no_is_false_without_error(self):
        p = make_prompt("no\n", policy=None)
        assert p.confirm("Do you agree?") is False

    @pytest.mark.parametrize("answer", ["ny\n", "maybe\n", "yes please\n", "YES\n", "Y\n", "yy\n"])
    def test_only_exact_yes_or_y_is_affirmative(self, answer):
        p = make_prompt(answer, policy=None)
        assert p.confirm("Do you agree?") is False


@pytest.mark.unit
class TestConfirmErrors:

    def test_empty_input_without_default_raises(self):
        p = make_prompt("\n")
        with pytest.raises(EmptyInputError):
            p.confirm("Do you agree?")

    def test_empty_input_with_options_but_no_default_raises(self):
        p = make_prompt("\n")
        with pytest.raises(EmptyInputError):
            p.confirm("Do you agree?", InputOptions())

    def test_validator_rejects_input(self):
        p = make_prompt("whatever\n")
        opts = InputOptions(validator=lambda v: None if v in ("yes", "no") else "answer yes or no")
        with pytest.raises(ValidationFailedError) as exc_info:
            p.confirm("Do you agree?", opts)
        assert exc_info.value.reason == "answer yes or no"

    def test_validator_sees_substituted_default(self):
        seen = []
        p = make_prompt("\n")
        p.confirm("Do you agree?", InputOptions(default="no", validator=lambda v: seen.append(v)))
        assert seen == ["no"]


@pytest.mark.unit
class TestConfirmOutput:

    def test_writes_default_annotation(self):
        out = io.StringIO()
        p = make_prompt("y\n", output=out)
        p.confirm("Do you confirm these changes", InputOptions(default="yes"))
        assert out.getvalue() == "Do you confirm these changes? [yes] "

    def test_consumes_one_line_per_call(self):
        p = make_prompt("y\nno\n")
        assert p.confirm("First") is True
        assert p.confirm("Second") is False
