"""Configuration model for the commit linter."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from commitlint.utils.config_loader import ConfigError

from .presets import get_preset

logger = logging.getLogger(__name__)

# A rule descriptor is either a (level, condition[, value]) sequence, a mapping
# with level/rule/value keys, or a zero-argument callable producing one of those.
RuleDescriptor = Sequence[Any] | Mapping[str, Any] | Callable[[], Any]


class RuleLevel(IntEnum):
	"""Severity of a rule."""

	DISABLED = 0
	WARNING = 1
	ERROR = 2

	@classmethod
	def parse(cls, value: object) -> RuleLevel:
		"""
		Parse a severity from an int or a level name.

		Raises:
		    ConfigError: If the value is not a known severity

		"""
		if isinstance(value, RuleLevel):
			return value
		if isinstance(value, bool):
			msg = f"Invalid rule level: {value!r}"
			raise ConfigError(msg)
		if isinstance(value, int):
			try:
				return cls(value)
			except ValueError as e:
				msg = f"Invalid rule level: {value!r} (expected 0, 1 or 2)"
				raise ConfigError(msg) from e
		if isinstance(value, str):
			name = value.strip().lower()
			aliases = {
				"0": cls.DISABLED,
				"off": cls.DISABLED,
				"disabled": cls.DISABLED,
				"1": cls.WARNING,
				"warn": cls.WARNING,
				"warning": cls.WARNING,
				"2": cls.ERROR,
				"error": cls.ERROR,
			}
			if name in aliases:
				return aliases[name]
		msg = f"Invalid rule level: {value!r}"
		raise ConfigError(msg)


class RuleCondition(str, Enum):
	"""Applicability of a rule."""

	ALWAYS = "always"
	NEVER = "never"

	@classmethod
	def parse(cls, value: object) -> RuleCondition:
		"""Parse an applicability, raising ConfigError for unknown values."""
		if isinstance(value, RuleCondition):
			return value
		try:
			return cls(str(value).strip().lower())
		except ValueError as e:
			msg = f"Invalid rule condition: {value!r} (expected 'always' or 'never')"
			raise ConfigError(msg) from e


@dataclass(frozen=True)
class Rule:
	"""A fully resolved rule: name, severity, applicability and optional value."""

	name: str
	level: RuleLevel
	condition: RuleCondition = RuleCondition.ALWAYS
	value: Any = None

	@property
	def enabled(self) -> bool:
		"""Whether the rule can ever fail."""
		return self.level is not RuleLevel.DISABLED

	def as_tuple(self) -> tuple[Any, ...]:
		"""Return the descriptor triple for this rule."""
		if self.value is None:
			return (int(self.level), self.condition.value)
		return (int(self.level), self.condition.value, self.value)


def resolve_rule(name: str, descriptor: RuleDescriptor) -> Rule:
	"""
	Resolve a rule descriptor into a Rule.

	Callables are evaluated here, so rules declared as functions are only
	computed when a lint run actually asks for them.

	Args:
	    name: Rule name, e.g. "header-max-length"
	    descriptor: Triple, mapping or callable producing either

	Returns:
	    Rule: The resolved rule

	Raises:
	    ConfigError: If the descriptor is malformed

	"""
	if callable(descriptor):
		descriptor = descriptor()

	if isinstance(descriptor, Rule):
		return descriptor

	if isinstance(descriptor, Mapping):
		if "level" not in descriptor:
			msg = f"Rule '{name}' is missing a level"
			raise ConfigError(msg)
		return Rule(
			name=name,
			level=RuleLevel.parse(descriptor["level"]),
			condition=RuleCondition.parse(descriptor.get("rule", RuleCondition.ALWAYS)),
			value=descriptor.get("value"),
		)

	if isinstance(descriptor, Sequence) and not isinstance(descriptor, str):
		if not descriptor:
			msg = f"Rule '{name}' has an empty descriptor"
			raise ConfigError(msg)
		level = RuleLevel.parse(descriptor[0])
		condition = RuleCondition.parse(descriptor[1]) if len(descriptor) > 1 else RuleCondition.ALWAYS
		value = descriptor[2] if len(descriptor) > 2 else None  # noqa: PLR2004
		return Rule(name=name, level=level, condition=condition, value=value)

	msg = f"Rule '{name}' has an invalid descriptor: {descriptor!r}"
	raise ConfigError(msg)


@dataclass
class CommitLintConfig:
	"""
	Commit lint configuration record.

	Holds the preset names to extend, the rule descriptors keyed by rule name,
	the help URL shown on failure, and the ignore settings.

	"""

	extends: list[str] = field(default_factory=list)
	rules: dict[str, RuleDescriptor] = field(default_factory=dict)
	help_url: str | None = None
	default_ignores: bool = True
	ignores: list[str] = field(default_factory=list)

	@classmethod
	def from_dict(cls, data: Mapping[str, Any]) -> CommitLintConfig:
		"""
		Build a config from a dictionary.

		Accepts both the YAML style keys (help_url, default_ignores) and the
		commitlint style keys (helpUrl, defaultIgnores).

		"""
		if not isinstance(data, Mapping):
			msg = f"Lint configuration must be a mapping, got {type(data).__name__}"
			raise ConfigError(msg)

		extends = data.get("extends") or []
		if isinstance(extends, str):
			extends = [extends]

		rules = data.get("rules") or {}
		if not isinstance(rules, Mapping):
			msg = "'rules' must be a mapping of rule name to descriptor"
			raise ConfigError(msg)

		ignores = data.get("ignores") or []
		for pattern in ignores:
			try:
				re.compile(pattern)
			except (re.error, TypeError) as e:
				msg = f"Invalid ignore pattern {pattern!r}: {e}"
				raise ConfigError(msg) from e

		return cls(
			extends=list(extends),
			rules=dict(rules),
			help_url=data.get("help_url", data.get("helpUrl")),
			default_ignores=bool(data.get("default_ignores", data.get("defaultIgnores", True))),
			ignores=list(ignores),
		)

	def resolve(self) -> dict[str, Rule]:
		"""
		Resolve presets and rule descriptors into concrete rules.

		Presets are applied in order, then this config's own rules; a later
		entry replaces an earlier one with the same name.

		Returns:
		    Dict[str, Rule]: Resolved rules keyed by name

		"""
		descriptors: dict[str, RuleDescriptor] = {}
		for preset_name in self.extends:
			descriptors.update(get_preset(preset_name))
		descriptors.update(self.rules)

		resolved = {name: resolve_rule(name, descriptor) for name, descriptor in descriptors.items()}
		logger.debug("Resolved %d rules from %d presets", len(resolved), len(self.extends))
		return resolved
