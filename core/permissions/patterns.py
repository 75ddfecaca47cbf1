"""Static pattern catalog for command classification.

Every group is compiled once at import and never mutated. Patterns are
matched against normalized commands (trimmed, single-spaced) and evaluated
in order; the first match wins.
"""

import re

# `rm` with both the recursive and force flags, in any common spelling:
# -rf, -fr, -Rf, -rfv, -r -f, -f -r
_RM_RECURSIVE_FORCE = (
    r"rm\s+(?:-[a-zA-Z]*[rR][a-zA-Z]*f[a-zA-Z]*"
    r"|-[a-zA-Z]*f[a-zA-Z]*[rR][a-zA-Z]*"
    r"|-[rR]\s+-f|-f\s+-[rR])"
)
_SUDO = r"(?:sudo\s+)?"
_HOME = r"(?:~|\$HOME|\$\{HOME\})"
# Path operand, optionally after -- and an opening quote
_TARGET = r"""\s+(?:--\s+)?["']?"""
_SHELL = r"(?:ba|z|da|k)?sh"
_FETCH = r"(?:curl|wget)\b"


def _compile_rules(rules: list[tuple[str, str]]) -> tuple[tuple[re.Pattern[str], str], ...]:
    return tuple((re.compile(pattern), reason) for pattern, reason in rules)


# =============================================================================
# Always-blocked commands
# =============================================================================

# Checked before anything else, in every mode including allow-all.
ALWAYS_BLOCKED_PATTERNS = _compile_rules(
    [
        # Destructive filesystem operations
        ("^" + _SUDO + _RM_RECURSIVE_FORCE + _TARGET + "/", "Recursive delete of an absolute path"),
        (
            "^" + _SUDO + _RM_RECURSIVE_FORCE + _TARGET + _HOME + r"""(?:/|["']|\s|$)""",
            "Recursive delete of the home directory",
        ),
        ("^" + _SUDO + _RM_RECURSIVE_FORCE + r"\s+\*", "Wildcard recursive delete"),
        (r"^sudo\s+" + _RM_RECURSIVE_FORCE, "Privileged recursive delete"),
        ("^" + _SUDO + r"chmod\s+-R\s+777", "Recursive world-writable permission change"),
        ("^" + _SUDO + r"mkfs(?:\.\w+)?(?:\s|$)", "Filesystem creation"),
        ("^" + _SUDO + r"dd\s+.*of=/dev/", "Raw disk write"),
        (r">\s*/dev/(?:sd|hd|vd|nvme|disk)", "Raw disk write"),
        # Fork bombs
        (r":\(\)\s*\{.*\}.*:", "Fork bomb detected"),
        (r"(\w+)\(\)\s*\{[^}]*\1\s*\|\s*\1", "Fork bomb detected"),
        (r"\.\s*/dev/null", "Sourcing /dev/null"),
        # Remote script execution
        (_FETCH + r".*\|\s*(?:sudo\s+)?" + _SHELL + r"\b", "Remote script piped into a shell"),
        (r"\b" + _SHELL + r"\s+<\(\s*" + _FETCH, "Remote script executed by a shell"),
        (r"(?:\b" + _SHELL + r"\s+-c|\beval)\s+[\"']?\$\(\s*" + _FETCH, "Remote script executed by a shell"),
    ]
)


# =============================================================================
# Blocked shell constructs
# =============================================================================

# Checked in safe and ask modes. Order matters: the first match supplies the
# reason, so the more specific constructs come before the generic redirect.
BLOCKED_SHELL_CONSTRUCTS = _compile_rules(
    [
        # Process substitution
        (r"[<>]\(", "Process substitution detected"),
        # Command substitution
        (r"\$\(", "Command substitution detected (injection risk)"),
        (r"`[^`]+`", "Command substitution detected (injection risk)"),
        # Output redirects: >, >>, 2>, &>, >&
        (r">", "Output redirect (file overwrite) detected"),
        # Background execution: a lone & (not part of &&)
        (r"(?<!&)&(?!&)", "Background execution detected"),
    ]
)


# =============================================================================
# Read-only bash commands
# =============================================================================

READ_ONLY_BASH_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for pattern in [
        # File exploration
        r"^ls(\s|$)",
        r"^cat\s+",
        r"^head\s+",
        r"^tail\s+",
        r"^less\s+",
        r"^more\s+",
        r"^file\s+",
        r"^wc\s+",
        r"^stat\s+",
        r"^find\s+(?!.*\s-(?:delete|exec|execdir|ok|okdir|fprint|fprint0|fprintf|fls)(?:\s|$)).*-type\s+[fd]",
        r"^find\s+(?!.*\s-(?:delete|exec|execdir|ok|okdir|fprint|fprint0|fprintf|fls)(?:\s|$)).*-name\s+",
        r"^tree(\s|$)",
        r"^du\s+",
        r"^df(\s|$)",
        # Git read operations
        r"^git\s+status",
        r"^git\s+log",
        r"^git\s+diff",
        r"^git\s+show",
        r"^git\s+branch(\s+-[avrl]|\s*$)",
        r"^git\s+remote\s+-v",
        r"^git\s+tag(\s+-l|\s*$)",
        r"^git\s+rev-parse",
        r"^git\s+describe",
        r"^git\s+config\s+--get",
        r"^git\s+ls-files",
        r"^git\s+ls-tree",
        r"^git\s+blame",
        r"^git\s+shortlog",
        r"^git\s+reflog(?!\s+(?:expire|delete))",
        # GitHub CLI read operations
        r"^gh\s+pr\s+(list|view|status|checks)",
        r"^gh\s+issue\s+(list|view|status)",
        r"^gh\s+repo\s+(view|list)",
        r"^gh\s+run\s+(list|view)",
        r"^gh\s+workflow\s+(list|view)",
        r"^gh\s+release\s+(list|view)",
        r"^gh\s+api\s+(?!.*\s(?:-X|--method|-f|-F|--field|--raw-field|--input)(?:\s|=|$))",
        # Package manager read operations
        r"^npm\s+(list|ls|outdated|view|info|search|audit(?!\s+fix))(\s|$)",
        r"^yarn\s+(list|info|outdated|why)(\s|$)",
        r"^pnpm\s+(list|ls|outdated|why)(\s|$)",
        r"^bun\s+pm\s+ls",
        r"^pip3?\s+(list|show|freeze)(\s|$)",
        r"^cargo\s+(tree|metadata)(\s|$)",
        r"^go\s+(list|mod\s+graph)(\s|$)",
        # Search tools
        r"^grep\s+",
        r"^rg\s+",
        r"^ag\s+",
        r"^ack\s+",
        r"^fd\s+",
        # System info
        r"^uname(\s|$)",
        r"^whoami$",
        r"^hostname(\s+-[a-zA-Z]+)*$",
        r"^pwd(\s|$)",
        r"^env$",
        r"^printenv(\s|$)",
        r"^echo\s+\$",
        r"^which\s+",
        r"^type\s+",
        r"^whereis\s+",
        r"^id(\s|$)",
        r"^date(?!.*\s(?:-s|--set)(?:\s|=|$))(\s|$)",
        r"^uptime(\s|$)",
        # Process info
        r"^ps(\s|$)",
        r"^top\s+-[ln]",
        r"^pgrep\s+",
        # Network info
        r"^ping\s+-c\s+\d",
        r"^curl\s+.*--head",
        r"^curl\s+-I",
        r"^wget\s+--spider",
        # Help and version flags
        r"^man\s+",
        r"^[\w.-]+(\s+[\w.:-]+)?\s+--help$",
        r"^[\w.-]+\s+(-h|--version|-v|-V)$",
    ]
)


# =============================================================================
# Tool names
# =============================================================================

# Structured tools rejected outright in safe mode
SAFE_MODE_BLOCKED_TOOLS: frozenset[str] = frozenset(
    {
        "Write",
        "Edit",
        "MultiEdit",
        "NotebookEdit",
        "TodoWrite",
    }
)

# Tools whose payload is a shell command; decided by the bash check
SHELL_TOOL_NAMES: frozenset[str] = frozenset({"Bash"})
