"""Built-in shareable configurations that a config can extend."""

from __future__ import annotations

from typing import Any

from commitlint.utils.config_loader import ConfigError

from .constants import DEFAULT_TYPES

CONFIG_CONVENTIONAL = "@commitlint/config-conventional"

# Rule descriptors of the conventional commits preset
CONVENTIONAL_RULES: dict[str, Any] = {
	"body-leading-blank": [1, "always"],
	"body-max-line-length": [2, "always", 100],
	"footer-leading-blank": [1, "always"],
	"footer-max-line-length": [2, "always", 100],
	"header-max-length": [2, "always", 100],
	"header-trim": [2, "always"],
	"subject-case": [2, "never", ["sentence-case", "start-case", "pascal-case", "upper-case"]],
	"subject-empty": [2, "never"],
	"subject-full-stop": [2, "never", "."],
	"type-case": [2, "always", "lower-case"],
	"type-empty": [2, "never"],
	"type-enum": [2, "always", DEFAULT_TYPES],
}

PRESETS: dict[str, dict[str, Any]] = {
	CONFIG_CONVENTIONAL: CONVENTIONAL_RULES,
}

# Short names accepted in place of the full package-style names
PRESET_ALIASES = {
	"config-conventional": CONFIG_CONVENTIONAL,
	"conventional": CONFIG_CONVENTIONAL,
}


def get_preset(name: str) -> dict[str, Any]:
	"""
	Look up the rule descriptors of a preset.

	Raises:
	    ConfigError: If no preset with that name exists

	"""
	canonical = PRESET_ALIASES.get(name, name)
	if canonical not in PRESETS:
		msg = f"Unknown preset '{name}'. Available presets: {', '.join(sorted(PRESETS))}"
		raise ConfigError(msg)
	return dict(PRESETS[canonical])
