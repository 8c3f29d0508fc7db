"""Default configuration settings for commitlint."""

HELP_URL = "https://github.com/flutter-tizen/flutterfire/blob/main/CONTRIBUTING.md"

# Commit types accepted by the repository
COMMIT_TYPES = ["feat", "fix", "refactor", "chore", "test", "doc", "release", "revert"]

# Commit scopes, one per plugin package plus tests
COMMIT_SCOPES = ["core", "database", "functions", "storage", "test"]

DEFAULT_CONFIG = {
	# Lint configuration consumed by the commit linter
	"lint": {
		# Presets applied before the rules below
		"extends": ["@commitlint/config-conventional"],
		"rules": {
			# Subject line capped at 72 characters
			"header-max-length": lambda: [2, "always", 72],
			"type-enum": lambda: [2, "always", list(COMMIT_TYPES)],
			"scope-enum": [2, "always", COMMIT_SCOPES],
			# Long URLs and stack traces are allowed in body and footer
			"body-max-line-length": [0, "always"],
			"footer-max-line-length": [0, "always"],
		},
		"help_url": HELP_URL,
		# Skip merge, revert and fixup commits
		"default_ignores": True,
		# Extra regular expressions for messages to skip
		"ignores": [],
	},
	# Output settings for the lint command
	"output": {
		# Print the report even when the message is valid
		"verbose": False,
		# Treat warnings as failures
		"strict": False,
	},
	# Git settings
	"git": {
		# Message file read by --edit when no path is given, relative to the
		# git directory
		"edit_file": "COMMIT_EDITMSG",
		# Target of --to when only --from is given
		"default_to": "HEAD",
	},
}
