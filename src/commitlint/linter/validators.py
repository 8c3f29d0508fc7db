"""
Rule implementations for commit message linting.

Every rule takes the parsed commit, the rule condition and the rule value and
returns a ``(valid, message)`` tuple. Rules whose part of the message is
absent pass; emptiness is covered by the ``*-empty`` rules.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .config import RuleCondition
from .constants import CASE_TYPES, SCOPE_SEPARATORS
from .parser import CommitMessage

RuleResult = tuple[bool, str]
RuleFunction = Callable[[CommitMessage, RuleCondition, Any], RuleResult]

RULES: dict[str, RuleFunction] = {}

_WORD_PATTERN = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]+|[0-9]+")
_QUOTED_PATTERN = re.compile(r"`.*?`|\".*?\"|'.*?'")
_CASED_START_PATTERN = re.compile(r"[a-z]", re.IGNORECASE)


def rule(name: str) -> Callable[[RuleFunction], RuleFunction]:
	"""Register a rule function under a rule name."""

	def decorator(func: RuleFunction) -> RuleFunction:
		RULES[name] = func
		return func

	return decorator


def _negated(when: RuleCondition) -> bool:
	return when is RuleCondition.NEVER


def _must(when: RuleCondition) -> str:
	return "must not" if _negated(when) else "must"


def _as_list(value: Any) -> list[Any]:
	if value is None:
		return []
	if isinstance(value, (list, tuple, set, frozenset)):
		return list(value)
	return [value]


# --- Case handling ---


def _words(text: str) -> list[str]:
	return _WORD_PATTERN.findall(text)


def _upper_first(text: str) -> str:
	return text[:1].upper() + text[1:]


def to_case(text: str, case: str) -> str:
	"""
	Convert text to the given case.

	Raises:
	    ValueError: If the case name is unknown

	"""
	words = _words(text)
	if case == "lower-case":
		return text.lower()
	if case == "upper-case":
		return text.upper()
	if case == "camel-case":
		return "".join(word.lower() if i == 0 else _upper_first(word.lower()) for i, word in enumerate(words))
	if case == "pascal-case":
		return "".join(_upper_first(word.lower()) for word in words)
	if case == "kebab-case":
		return "-".join(word.lower() for word in words)
	if case == "snake-case":
		return "_".join(word.lower() for word in words)
	if case == "start-case":
		return " ".join(_upper_first(word) for word in words)
	if case == "sentence-case":
		return _upper_first(text)
	msg = f"Unknown case '{case}'. Expected one of: {', '.join(CASE_TYPES)}"
	raise ValueError(msg)


def ensure_case(text: str, case: str) -> bool:
	"""Check whether text is already in the given case."""
	stripped = _QUOTED_PATTERN.sub("", text).strip()
	transformed = to_case(stripped, case)
	if not transformed or transformed[0].isdigit():
		return True
	return transformed == stripped


def _check_case(part: str, text: str | None, when: RuleCondition, value: Any) -> RuleResult:
	cases = _as_list(value)
	message = f"{part} {_must(when)} be {', '.join(cases)}"
	if not text or not cases:
		return True, message
	matched = any(ensure_case(text, case) for case in cases)
	return (not matched if _negated(when) else matched), message


def _check_enum(part: str, values: list[str], when: RuleCondition, value: Any) -> RuleResult:
	allowed = [str(item) for item in _as_list(value)]
	message = f"{part} {_must(when)} be one of [{', '.join(allowed)}]"
	if not values or not allowed:
		return True, message
	if _negated(when):
		return not any(item in allowed for item in values), message
	return all(item in allowed for item in values), message


def _check_empty(part: str, text: str | None, when: RuleCondition) -> RuleResult:
	is_empty = not (text and text.strip())
	if _negated(when):
		return not is_empty, f"{part} may not be empty"
	return is_empty, f"{part} must be empty"


def _check_full_stop(part: str, text: str | None, when: RuleCondition, value: Any) -> RuleResult:
	stop = "." if value is None else str(value)
	if not text:
		return True, ""
	ends_with_stop = text.endswith(stop)
	if _negated(when):
		return not ends_with_stop, f"{part} may not end with full stop"
	return ends_with_stop, f"{part} must end with full stop"


def _check_max_length(part: str, text: str | None, value: Any) -> RuleResult:
	limit = int(value)
	length = len(text) if text else 0
	return length <= limit, f"{part} must not be longer than {limit} characters, current length is {length}"


def _check_max_line_length(part: str, lines: list[str], value: Any) -> RuleResult:
	limit = int(value)
	longest = max((len(line) for line in lines), default=0)
	return longest <= limit, f"{part}'s lines must not be longer than {limit} characters"


def _check_leading_blank(part: str, present: bool, leading_blank: bool, when: RuleCondition) -> RuleResult:
	if not present:
		return True, ""
	if _negated(when):
		return not leading_blank, f"{part} must not have leading blank line"
	return leading_blank, f"{part} must have leading blank line"


# --- Header ---


@rule("header-max-length")
def header_max_length(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_max_length("header", commit.header, value)


@rule("header-min-length")
def header_min_length(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	limit = int(value)
	length = len(commit.header)
	return length >= limit, f"header must not be shorter than {limit} characters, current length is {length}"


@rule("header-full-stop")
def header_full_stop(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_full_stop("header", commit.header, when, value)


@rule("header-case")
def header_case(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_case("header", commit.header, when, value)


@rule("header-trim")
def header_trim(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	header = commit.header
	if header.startswith((" ", "\t")):
		return False, "header must not start with whitespace"
	if header.endswith((" ", "\t")):
		return False, "header must not end with whitespace"
	return True, "header must not be surrounded by whitespace"


# --- Type ---


@rule("type-enum")
def type_enum(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_enum("type", [commit.type] if commit.type else [], when, value)


@rule("type-case")
def type_case(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_case("type", commit.type, when, value)


@rule("type-empty")
def type_empty(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_empty("type", commit.type, when)


# --- Scope ---


def _split_scopes(scope: str | None) -> list[str]:
	if not scope:
		return []
	return [item.strip() for item in SCOPE_SEPARATORS.split(scope) if item.strip()]


@rule("scope-enum")
def scope_enum(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_enum("scope", _split_scopes(commit.scope), when, value)


@rule("scope-case")
def scope_case(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	scopes = _split_scopes(commit.scope)
	cases = _as_list(value)
	message = f"scope {_must(when)} be {', '.join(cases)}"
	if not scopes or not cases:
		return True, message
	results = [_check_case("scope", scope, when, value)[0] for scope in scopes]
	return all(results), message


@rule("scope-empty")
def scope_empty(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_empty("scope", commit.scope, when)


# --- Subject ---


@rule("subject-case")
def subject_case(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	subject = commit.subject
	# Only subjects starting with an ASCII letter are case checked
	if not subject or not _CASED_START_PATTERN.match(subject):
		return True, ""
	return _check_case("subject", subject, when, value)


@rule("subject-empty")
def subject_empty(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_empty("subject", commit.subject, when)


@rule("subject-full-stop")
def subject_full_stop(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_full_stop("subject", commit.subject, when, value)


@rule("subject-exclamation-mark")
def subject_exclamation_mark(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	has_mark = "!:" in commit.header
	if _negated(when):
		return not has_mark, "subject must not have an exclamation mark in the subject to identify a breaking change"
	return has_mark, "subject must have an exclamation mark in the subject to identify a breaking change"


# --- Body ---


@rule("body-leading-blank")
def body_leading_blank(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_leading_blank("body", commit.body is not None, commit.body_leading_blank, when)


@rule("body-empty")
def body_empty(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_empty("body", commit.body, when)


@rule("body-max-line-length")
def body_max_line_length(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_max_line_length("body", commit.body_lines, value)


@rule("body-max-length")
def body_max_length(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_max_length("body", commit.body, value)


# --- Footer ---


@rule("footer-leading-blank")
def footer_leading_blank(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_leading_blank("footer", commit.footer is not None, commit.footer_leading_blank, when)


@rule("footer-empty")
def footer_empty(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_empty("footer", commit.footer, when)


@rule("footer-max-line-length")
def footer_max_line_length(commit: CommitMessage, when: RuleCondition, value: Any) -> RuleResult:
	return _check_max_line_length("footer", commit.footer_lines, value)
