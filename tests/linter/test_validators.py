"""Tests for individual lint rules."""

from __future__ import annotations

import pytest

from commitlint.linter.config import RuleCondition
from commitlint.linter.parser import parse_commit_message
from commitlint.linter.validators import RULES, ensure_case, to_case

ALWAYS = RuleCondition.ALWAYS
NEVER = RuleCondition.NEVER


def run_rule(name: str, message: str, when: RuleCondition = ALWAYS, value: object = None) -> bool:
	"""Evaluate one rule against a message and return whether it passed."""
	valid, _ = RULES[name](parse_commit_message(message), when, value)
	return valid


@pytest.mark.unit
class TestCases:
	"""Case conversion helpers."""

	@pytest.mark.parametrize(
		("case", "expected"),
		[
			("lower-case", "add foo bar"),
			("upper-case", "ADD FOO BAR"),
			("camel-case", "addFooBar"),
			("pascal-case", "AddFooBar"),
			("kebab-case", "add-foo-bar"),
			("snake-case", "add_foo_bar"),
			("start-case", "Add Foo Bar"),
			("sentence-case", "Add foo bar"),
		],
	)
	def test_to_case(self, case: str, expected: str) -> None:
		"""Text is converted to each supported case."""
		assert to_case("add foo bar", case) == expected

	def test_unknown_case(self) -> None:
		"""Unknown case names raise ValueError."""
		with pytest.raises(ValueError, match="Unknown case"):
			to_case("text", "title-case")

	def test_ensure_case(self) -> None:
		"""ensure_case checks whether text is already in a case."""
		assert ensure_case("add foo", "lower-case")
		assert not ensure_case("Add foo", "lower-case")
		assert ensure_case("Add foo", "sentence-case")
		assert ensure_case("AddFoo", "pascal-case")

	def test_ensure_case_ignores_quoted_text(self) -> None:
		"""Quoted identifiers do not affect the case check."""
		assert ensure_case("rename `FirebaseApp` class", "lower-case")

	def test_ensure_case_without_letters(self) -> None:
		"""Text starting with a digit matches any case."""
		assert ensure_case("2 fixes", "upper-case")


@pytest.mark.unit
class TestHeaderRules:
	"""Header rules."""

	def test_header_max_length(self) -> None:
		"""Headers are limited to the configured length."""
		assert run_rule("header-max-length", "feat: " + "a" * 66, value=72)
		assert not run_rule("header-max-length", "feat: " + "a" * 67, value=72)

	def test_header_max_length_message(self) -> None:
		"""The failure message reports the current length."""
		_, message = RULES["header-max-length"](parse_commit_message("feat: " + "a" * 94), ALWAYS, 72)

		assert message == "header must not be longer than 72 characters, current length is 100"

	def test_header_min_length(self) -> None:
		"""Headers can require a minimum length."""
		assert not run_rule("header-min-length", "feat: a", value=10)
		assert run_rule("header-min-length", "feat: abcdef", value=10)

	def test_header_full_stop(self) -> None:
		"""The header may be required not to end with a full stop."""
		assert not run_rule("header-full-stop", "feat: add foo.", NEVER, ".")
		assert run_rule("header-full-stop", "feat: add foo", NEVER, ".")

	def test_header_trim(self) -> None:
		"""Leading or trailing whitespace in the header fails."""
		assert run_rule("header-trim", "feat: add foo")
		assert not run_rule("header-trim", "  feat: add foo")
		assert not run_rule("header-trim", "feat: add foo  ")

	def test_header_case(self) -> None:
		"""The whole header can be case checked."""
		assert run_rule("header-case", "feat: add foo", value="lower-case")
		assert not run_rule("header-case", "feat: Add foo", value="lower-case")


@pytest.mark.unit
class TestTypeAndScopeRules:
	"""Type and scope rules."""

	def test_type_enum(self) -> None:
		"""The type must be in the list; 'never' inverts the check."""
		assert run_rule("type-enum", "feat: x", value=["feat", "fix"])
		assert not run_rule("type-enum", "docs: x", value=["feat", "fix"])
		assert not run_rule("type-enum", "feat: x", NEVER, ["feat"])

	def test_type_enum_message(self) -> None:
		"""The failure message lists the allowed types."""
		_, message = RULES["type-enum"](parse_commit_message("foo: x"), ALWAYS, ["feat", "fix"])

		assert message == "type must be one of [feat, fix]"

	def test_type_enum_without_type(self) -> None:
		"""Missing types are left to type-empty."""
		assert run_rule("type-enum", "no type here", value=["feat"])

	def test_type_empty(self) -> None:
		"""type-empty with 'never' requires a type."""
		assert not run_rule("type-empty", "no type here", NEVER)
		assert run_rule("type-empty", "feat: x", NEVER)

	def test_type_case(self) -> None:
		"""The type must be lower case."""
		assert not run_rule("type-case", "Feat: x", value="lower-case")

	def test_scope_enum(self) -> None:
		"""Every scope must be in the list."""
		scopes = ["core", "storage"]
		assert run_rule("scope-enum", "feat(core): x", value=scopes)
		assert run_rule("scope-enum", "feat(core/storage): x", value=scopes)
		assert not run_rule("scope-enum", "feat(ui): x", value=scopes)
		assert run_rule("scope-enum", "feat: x", value=scopes)

	def test_scope_empty(self) -> None:
		"""scope-empty with 'never' requires a scope."""
		assert not run_rule("scope-empty", "feat: x", NEVER)
		assert run_rule("scope-empty", "feat(core): x", NEVER)

	def test_scope_case(self) -> None:
		"""Each scope is case checked."""
		assert run_rule("scope-case", "feat(core,storage): x", value="lower-case")
		assert not run_rule("scope-case", "feat(core,Storage): x", value="lower-case")


@pytest.mark.unit
class TestSubjectRules:
	"""Subject rules."""

	PRESET_CASES = ["sentence-case", "start-case", "pascal-case", "upper-case"]

	def test_subject_case_never(self) -> None:
		"""Subjects must not be in any of the listed cases."""
		assert run_rule("subject-case", "feat: add foo", NEVER, self.PRESET_CASES)
		assert not run_rule("subject-case", "feat: Add foo", NEVER, self.PRESET_CASES)
		assert not run_rule("subject-case", "feat: ADD FOO", NEVER, self.PRESET_CASES)

	def test_subject_case_skips_non_letters(self) -> None:
		"""Subjects not starting with a letter are not case checked."""
		assert run_rule("subject-case", "feat: 2FA support", NEVER, self.PRESET_CASES)

	@pytest.mark.parametrize(
		"message",
		[
			"fix(core): 한글 메시지 지원",
			"fix(core): 修复空指针",
			"fix(core): ログを追加",
			"fix(core): ändere Standardwert",
			"fix(core): Éviter le plantage",
		],
	)
	def test_subject_case_skips_non_ascii_start(self, message: str) -> None:
		"""Subjects not starting with an ASCII letter are not case checked."""
		assert run_rule("subject-case", message, NEVER, self.PRESET_CASES)

	def test_subject_empty(self) -> None:
		"""subject-empty with 'never' requires a subject."""
		assert not run_rule("subject-empty", "not conventional", NEVER)
		assert run_rule("subject-empty", "feat: x", NEVER)

	def test_subject_full_stop(self) -> None:
		"""The subject must not end with a full stop."""
		assert not run_rule("subject-full-stop", "feat: add foo.", NEVER, ".")
		assert run_rule("subject-full-stop", "feat: add foo", NEVER, ".")

	def test_subject_exclamation_mark(self) -> None:
		"""The breaking marker can be forbidden."""
		assert not run_rule("subject-exclamation-mark", "feat!: drop api", NEVER)
		assert run_rule("subject-exclamation-mark", "feat: drop api", NEVER)


@pytest.mark.unit
class TestBodyAndFooterRules:
	"""Body and footer rules."""

	def test_body_leading_blank(self) -> None:
		"""The body must be separated from the header."""
		assert run_rule("body-leading-blank", "feat: x\n\nbody")
		assert not run_rule("body-leading-blank", "feat: x\nbody")
		assert run_rule("body-leading-blank", "feat: x")

	def test_body_empty(self) -> None:
		"""body-empty with 'never' requires a body."""
		assert not run_rule("body-empty", "feat: x", NEVER)
		assert run_rule("body-empty", "feat: x\n\nbody", NEVER)

	def test_body_max_line_length(self) -> None:
		"""Every body line is checked."""
		assert run_rule("body-max-line-length", "feat: x\n\nshort\nlines", value=10)
		assert not run_rule("body-max-line-length", "feat: x\n\nshort\n" + "y" * 11, value=10)

	def test_body_max_length(self) -> None:
		"""The whole body can be limited."""
		assert not run_rule("body-max-length", "feat: x\n\n" + "y" * 20, value=10)

	def test_footer_leading_blank(self) -> None:
		"""The footer must be separated from the body."""
		assert run_rule("footer-leading-blank", "feat: x\n\nbody\n\nRefs: #1")
		assert not run_rule("footer-leading-blank", "feat: x\nRefs: #1")

	def test_footer_empty(self) -> None:
		"""footer-empty with 'never' requires a footer."""
		assert not run_rule("footer-empty", "feat: x", NEVER)
		assert run_rule("footer-empty", "feat: x\n\nRefs: #1", NEVER)

	def test_footer_max_line_length(self) -> None:
		"""Every footer line is checked."""
		assert not run_rule("footer-max-line-length", "feat: x\n\nRefs: " + "1" * 20, value=10)
