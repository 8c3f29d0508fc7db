"""Constants for commit message linting."""

import re

# Header pattern: type(scope)!: subject
HEADER_PATTERN = re.compile(r"^(?P<type>\w*)(?:\((?P<scope>[^()\r\n]*)\))?(?P<breaking>!)?: (?P<subject>.*)$")

# Footer token pattern: "Token: value", "Token #value" or "BREAKING CHANGE: value"
FOOTER_PATTERN = re.compile(r"^(?P<token>BREAKING[ -]CHANGE|[\w-]+)(?::[ ]|[ ]#)(?P<value>.*)$")

BREAKING_CHANGE_TOKENS = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})

# Separators accepted between multiple scopes, e.g. "core,database"
SCOPE_SEPARATORS = re.compile(r"[,/\\]")

# Git comment prefix in COMMIT_EDITMSG
COMMENT_CHAR = "#"

# Messages skipped when default ignores are enabled
DEFAULT_IGNORE_PATTERNS = (
	re.compile(r"^Merge pull request #\d+"),
	re.compile(r"^Merge (remote-tracking )?branch "),
	re.compile(r"^Merge tag "),
	re.compile(r"^Merge .+ into .+"),
	re.compile(r"^Merged .+ (in|into) .+"),
	re.compile(r"^(R|r)evert "),
	re.compile(r"^(amend|fixup|squash)! "),
	re.compile(r"^Automatic merge"),
	re.compile(r"^Auto-merged .+ into .+"),
	re.compile(r"^Initial commit$", re.IGNORECASE),
)

CASE_TYPES = (
	"lower-case",
	"upper-case",
	"camel-case",
	"kebab-case",
	"pascal-case",
	"sentence-case",
	"snake-case",
	"start-case",
)

# Conventional commit types used by the config-conventional preset
DEFAULT_TYPES = [
	"build",
	"chore",
	"ci",
	"docs",
	"feat",
	"fix",
	"perf",
	"refactor",
	"revert",
	"style",
	"test",
]

# Exit codes of the lint command
EXIT_ERRORS = 1
EXIT_WARNINGS_STRICT = 2
