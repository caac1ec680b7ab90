"""
Language registry for heuristic code analysis.

Maps file extensions to the regular expressions used for dependency
extraction, entry point detection and code element carving. Supporting a
new language means adding one LanguageRules entry to LANGUAGES.

Pattern conventions:
- dependency patterns expose the module text in a group named "module";
  when one match can hold several modules (Go import blocks, Python
  "import a, b") the rule's `split` pattern pulls them out of that group
- element patterns expose "name", and optionally "export", "async" and
  "body" (the text scanned for method names)
"""

import re
from dataclasses import dataclass, field

_M = re.MULTILINE
_MS = re.MULTILINE | re.DOTALL


@dataclass(frozen=True)
class DependencyRule:
    """Regex yielding imported module names."""

    pattern: re.Pattern[str]
    split: re.Pattern[str] | None = None


@dataclass(frozen=True)
class ElementRule:
    """Regex carving one kind of declaration out of a file."""

    kind: str  # "class", "function", "arrow_function", "interface", "type"
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class LanguageRules:
    """Everything the analyzer knows about one language."""

    name: str
    extensions: tuple[str, ...]
    dependency_rules: tuple[DependencyRule, ...] = ()
    entry_signatures: tuple[re.Pattern[str], ...] = ()
    element_rules: tuple[ElementRule, ...] = ()
    method_pattern: re.Pattern[str] | None = None
    # Words the method scan can mistake for method names
    method_exclusions: frozenset[str] = field(default_factory=frozenset)


# ─────────────────────────────────────────────────────────────
# Shared Patterns
# ─────────────────────────────────────────────────────────────

_CONTROL_KEYWORDS = frozenset(
    {
        "if",
        "for",
        "foreach",
        "while",
        "switch",
        "catch",
        "return",
        "function",
        "else",
        "do",
        "try",
        "new",
        "super",
        "this",
        "using",
        "lock",
        "synchronized",
        "sizeof",
        "delete",
    }
)

# class Foo ... { <body> } with the closing brace at column 0
_BRACE_CLASS = re.compile(
    r"^[ \t]*(?P<export>(?:export|public)\s+)?"
    r"(?:(?:default|abstract|private|protected|internal|final|sealed|static|partial|open|data)\s+)*"
    r"class\s+(?P<name>\w+)[^{;]*\{(?P<body>.*?)^\}",
    _MS,
)

# Access-modifier-prefixed signatures inside a brace class body
_BRACE_METHOD = re.compile(
    r"^[ \t]+(?:(?:public|private|protected|internal|static|async|override|readonly|"
    r"abstract|final|virtual|synchronized)\s+)*"
    r"(?:[\w<>\[\],.?]+\s+)?(?P<name>\w+)\s*\([^)]*\)\s*"
    r"(?::\s*[^{;=]+?)?(?:\s*throws\s+[\w.,\s]+?)?\s*\{",
    _M,
)

_JS_DEPENDENCIES = (
    DependencyRule(
        re.compile(
            r"\b(?:import|export)\s+(?:type\s+)?[^'\"`;]*?\s+from\s+['\"`](?P<module>[^'\"`]+)['\"`]"
        )
    ),
    DependencyRule(re.compile(r"^[ \t]*import\s+['\"`](?P<module>[^'\"`]+)['\"`]", _M)),
    DependencyRule(re.compile(r"\brequire\(\s*['\"`](?P<module>[^'\"`]+)['\"`]\s*\)")),
    DependencyRule(re.compile(r"\bimport\(\s*['\"`](?P<module>[^'\"`]+)['\"`]\s*\)")),
)

_JS_ENTRY_SIGNATURES = (
    re.compile(r"express\(\)"),
    re.compile(r"\bcreateApp\("),
    re.compile(r"ReactDOM\.render"),
    re.compile(r"\bcreateRoot\("),
    re.compile(r"new\s+Server\("),
    re.compile(r"\bcreateServer\("),
    re.compile(r"\bapp\.listen\("),
)

_JS_ELEMENTS = (
    ElementRule("class", _BRACE_CLASS),
    ElementRule(
        "function",
        re.compile(
            r"(?P<export>\bexport\s+(?:default\s+)?)?(?P<async>\basync\s+)?\bfunction\s*\*?\s*(?P<name>\w+)"
        ),
    ),
    ElementRule(
        "arrow_function",
        re.compile(
            r"(?P<export>\bexport\s+)?\b(?:const|let)\s+(?P<name>\w+)\s*(?::[^=]+)?=\s*"
            r"(?P<async>async\s+)?(?:\([^)]*\)|\w+)\s*(?::\s*[^=]+?)?=>"
        ),
    ),
)

_TS_ELEMENTS = _JS_ELEMENTS + (
    ElementRule(
        "interface",
        re.compile(r"^[ \t]*(?P<export>export\s+)?(?:declare\s+)?interface\s+(?P<name>\w+)", _M),
    ),
    ElementRule(
        "type",
        re.compile(
            r"^[ \t]*(?P<export>export\s+)?(?:declare\s+)?type\s+(?P<name>\w+)\s*(?:<[^>]*>)?\s*=",
            _M,
        ),
    ),
)


# ─────────────────────────────────────────────────────────────
# Language Table
# ─────────────────────────────────────────────────────────────

LANGUAGES: list[LanguageRules] = [
    LanguageRules(
        name="JavaScript",
        extensions=(".js", ".jsx", ".mjs", ".cjs", ".vue", ".svelte"),
        dependency_rules=_JS_DEPENDENCIES,
        entry_signatures=_JS_ENTRY_SIGNATURES,
        element_rules=_JS_ELEMENTS,
        method_pattern=_BRACE_METHOD,
        method_exclusions=_CONTROL_KEYWORDS,
    ),
    LanguageRules(
        name="TypeScript",
        extensions=(".ts", ".tsx"),
        dependency_rules=_JS_DEPENDENCIES,
        entry_signatures=_JS_ENTRY_SIGNATURES,
        element_rules=_TS_ELEMENTS,
        method_pattern=_BRACE_METHOD,
        method_exclusions=_CONTROL_KEYWORDS,
    ),
    LanguageRules(
        name="Python",
        extensions=(".py",),
        dependency_rules=(
            DependencyRule(re.compile(r"^[ \t]*from[ \t]+(?P<module>\.*[\w.]*)[ \t]+import\b", _M)),
            DependencyRule(
                re.compile(
                    r"^[ \t]*import[ \t]+(?P<module>[\w.]+(?:[ \t]+as[ \t]+\w+)?"
                    r"(?:[ \t]*,[ \t]*[\w.]+(?:[ \t]+as[ \t]+\w+)?)*)",
                    _M,
                ),
                split=re.compile(r"(?:^|,)\s*([\w.]+)"),
            ),
        ),
        entry_signatures=(
            re.compile(r"if\s+__name__\s*==\s*['\"]__main__['\"]"),
            re.compile(r"\buvicorn\.run\("),
            re.compile(r"\bapp\.run\("),
        ),
        element_rules=(
            ElementRule(
                "class",
                re.compile(
                    r"^class\s+(?P<name>\w+)[^\n]*:[ \t]*(?:#[^\n]*)?\n"
                    r"(?P<body>(?:[ \t]+[^\n]*(?:\n|$)|[ \t]*\n)*)",
                    _M,
                ),
            ),
            ElementRule("function", re.compile(r"^(?P<async>async\s+)?def\s+(?P<name>\w+)", _M)),
        ),
        method_pattern=re.compile(r"^[ \t]+(?:async\s+)?def\s+(?P<name>\w+)", _M),
    ),
    LanguageRules(
        name="Go",
        extensions=(".go",),
        dependency_rules=(
            DependencyRule(
                re.compile(r"^import\s*\((?P<module>[^)]*)\)", _M),
                split=re.compile(r"\"([^\"]+)\""),
            ),
            DependencyRule(re.compile(r"^import\s+(?:[\w.]+\s+)?\"(?P<module>[^\"]+)\"", _M)),
        ),
        entry_signatures=(
            re.compile(r"\bfunc\s+main\s*\(\s*\)"),
            re.compile(r"^package\s+main\b", _M),
        ),
        element_rules=(
            ElementRule(
                "class",
                re.compile(r"^type\s+(?P<name>\w+)\s+struct\s*\{(?P<body>.*?)^\}", _MS),
            ),
            ElementRule(
                "function",
                re.compile(r"^func\s+(?:\([^)]*\)\s*)?(?P<name>\w+)", _M),
            ),
        ),
    ),
    LanguageRules(
        name="Rust",
        extensions=(".rs",),
        dependency_rules=(
            DependencyRule(
                re.compile(
                    r"^[ \t]*(?:pub(?:\([^)]*\))?\s+)?use\s+(?P<module>[\w:]+?)(?:::\{|::\*|\s+as\b|\s*;)",
                    _M,
                )
            ),
            DependencyRule(re.compile(r"^[ \t]*extern\s+crate\s+(?P<module>\w+)", _M)),
        ),
        entry_signatures=(re.compile(r"\bfn\s+main\s*\(\s*\)"),),
        element_rules=(
            ElementRule(
                "class",
                re.compile(r"^(?P<export>pub(?:\([^)]*\))?\s+)?(?:struct|enum)\s+(?P<name>\w+)", _M),
            ),
            ElementRule(
                "function",
                re.compile(
                    r"^[ \t]*(?P<export>pub(?:\([^)]*\))?\s+)?(?:const\s+)?(?P<async>async\s+)?"
                    r"(?:unsafe\s+)?(?:extern\s+\"[^\"]*\"\s+)?fn\s+(?P<name>\w+)",
                    _M,
                ),
            ),
        ),
    ),
    LanguageRules(
        name="C/C++",
        extensions=(".c", ".cpp", ".cc", ".h", ".hpp", ".hxx"),
        dependency_rules=(
            DependencyRule(re.compile(r"^[ \t]*#\s*include\s*[<\"](?P<module>[^>\"]+)[>\"]", _M)),
        ),
        entry_signatures=(
            re.compile(r"\bint\s+main\s*\("),
            re.compile(r"\bvoid\s+main\s*\("),
        ),
        element_rules=(
            ElementRule(
                "class",
                re.compile(
                    r"^(?:template\s*<[^>]*>\s*)?class\s+(?P<name>\w+)[^;{]*\{(?P<body>.*?)^\};",
                    _MS,
                ),
            ),
            ElementRule(
                "function",
                re.compile(
                    r"^(?:(?:static|inline|extern)\s+)*[\w:<>]+(?:[ \t]+[\w:<>]+){0,3}[ \t*&]+"
                    r"(?P<name>\w+)\s*\([^;)]*\)\s*(?:const\s*)?\{",
                    _M,
                ),
            ),
        ),
        method_pattern=re.compile(
            r"^[ \t]+(?:(?:virtual|static|inline|explicit)\s+)*(?:[\w:<>]+[ \t*&]+){0,3}"
            r"(?P<name>~?\w+)\s*\([^)]*\)\s*(?:const\s*)?(?:override\s*)?(?:=\s*0\s*)?[;{]",
            _M,
        ),
        method_exclusions=_CONTROL_KEYWORDS,
    ),
    LanguageRules(
        name="Java",
        extensions=(".java",),
        dependency_rules=(
            DependencyRule(re.compile(r"^[ \t]*import\s+(?:static\s+)?(?P<module>[\w.]+(?:\.\*)?)\s*;", _M)),
        ),
        entry_signatures=(
            re.compile(r"public\s+static\s+void\s+main\s*\("),
            re.compile(r"@SpringBootApplication\b"),
        ),
        element_rules=(ElementRule("class", _BRACE_CLASS),),
        method_pattern=_BRACE_METHOD,
        method_exclusions=_CONTROL_KEYWORDS,
    ),
    LanguageRules(
        name="Kotlin",
        extensions=(".kt", ".kts"),
        dependency_rules=(
            DependencyRule(re.compile(r"^[ \t]*import\s+(?P<module>[\w.]+(?:\.\*)?)", _M)),
        ),
        entry_signatures=(re.compile(r"\bfun\s+main\s*\("),),
        element_rules=(
            ElementRule("class", _BRACE_CLASS),
            ElementRule(
                "function",
                re.compile(
                    r"^(?P<export>public\s+)?(?:(?:private|internal)\s+)?(?P<async>suspend\s+)?"
                    r"fun\s+(?:<[^>]+>\s+)?(?P<name>\w+)",
                    _M,
                ),
            ),
        ),
        method_pattern=re.compile(
            r"^[ \t]+(?:(?:public|private|protected|internal|override|open|suspend)\s+)*fun\s+(?P<name>\w+)",
            _M,
        ),
    ),
    LanguageRules(
        name="C#",
        extensions=(".cs",),
        dependency_rules=(
            DependencyRule(re.compile(r"^[ \t]*using\s+(?:static\s+)?(?P<module>[\w.]+)\s*;", _M)),
        ),
        entry_signatures=(
            re.compile(r"static\s+(?:async\s+)?(?:void|int|Task(?:<int>)?)\s+Main\s*\("),
        ),
        element_rules=(ElementRule("class", _BRACE_CLASS),),
        method_pattern=_BRACE_METHOD,
        method_exclusions=_CONTROL_KEYWORDS,
    ),
    LanguageRules(
        name="PHP",
        extensions=(".php",),
        dependency_rules=(DependencyRule(re.compile(r"^[ \t]*use\s+(?P<module>[\w\\]+)", _M)),),
        entry_signatures=(re.compile(r"\$app->run\("),),
        element_rules=(
            ElementRule("class", _BRACE_CLASS),
            ElementRule("function", re.compile(r"^function\s+(?P<name>\w+)", _M)),
        ),
        method_pattern=re.compile(
            r"^[ \t]+(?:(?:public|private|protected|static|abstract|final)\s+)*function\s+(?P<name>\w+)",
            _M,
        ),
    ),
    LanguageRules(
        name="Ruby",
        extensions=(".rb",),
        dependency_rules=(
            DependencyRule(
                re.compile(r"^[ \t]*require(?:_relative)?\s*\(?\s*['\"](?P<module>[^'\"]+)['\"]", _M)
            ),
        ),
        entry_signatures=(re.compile(r"if\s+__FILE__\s*==\s*\$0"),),
        element_rules=(
            ElementRule(
                "class",
                re.compile(r"^class\s+(?P<name>\w+)[^\n]*\n(?P<body>.*?)^end\b", _MS),
            ),
            ElementRule("function", re.compile(r"^def\s+(?P<name>\w+[?!]?)", _M)),
        ),
        method_pattern=re.compile(r"^[ \t]+def\s+(?:self\.)?(?P<name>\w+[?!]?)", _M),
    ),
    LanguageRules(
        name="Swift",
        extensions=(".swift",),
        dependency_rules=(DependencyRule(re.compile(r"^[ \t]*import\s+(?P<module>\w[\w.]*)", _M)),),
        entry_signatures=(re.compile(r"^@main\b", _M), re.compile(r"\bUIApplicationMain\b")),
        element_rules=(
            ElementRule("class", _BRACE_CLASS),
            ElementRule(
                "function",
                re.compile(r"^(?P<export>(?:public|open)\s+)?func\s+(?P<name>\w+)", _M),
            ),
        ),
        method_pattern=re.compile(
            r"^[ \t]+(?:(?:public|private|internal|open|static|override|final|@objc)\s+)*func\s+(?P<name>\w+)",
            _M,
        ),
    ),
    LanguageRules(
        name="Dart",
        extensions=(".dart",),
        dependency_rules=(
            DependencyRule(re.compile(r"^[ \t]*import\s+['\"](?P<module>[^'\"]+)['\"]", _M)),
        ),
        entry_signatures=(re.compile(r"\bvoid\s+main\s*\("), re.compile(r"\brunApp\(")),
        element_rules=(
            ElementRule("class", _BRACE_CLASS),
            ElementRule(
                "function",
                re.compile(
                    r"^(?:Future<[^>]*>|void|[\w<>?]+)\s+(?P<name>\w+)\s*\([^)]*\)\s*(?P<async>async\s*)?\{",
                    _M,
                ),
            ),
        ),
        method_pattern=_BRACE_METHOD,
        method_exclusions=_CONTROL_KEYWORDS,
    ),
    LanguageRules(
        name="Haskell/Elm",
        extensions=(".hs", ".elm"),
        dependency_rules=(
            DependencyRule(re.compile(r"^import\s+(?:qualified\s+)?(?P<module>[\w.]+)", _M)),
        ),
        entry_signatures=(re.compile(r"^main\s*(?:::|=)", _M),),
    ),
    LanguageRules(
        name="Shell",
        extensions=(".sh", ".bash"),
        element_rules=(
            ElementRule(
                "function",
                re.compile(r"^(?:function\s+)?(?P<name>[\w-]+)\s*\(\)\s*\{", _M),
            ),
        ),
    ),
]

_REGISTRY: dict[str, LanguageRules] = {
    extension: rules for rules in LANGUAGES for extension in rules.extensions
}


def rules_for(extension: str) -> LanguageRules | None:
    """Return the rules registered for a file extension (e.g. ".py")."""
    return _REGISTRY.get(extension.lower())


def supported_extensions() -> list[str]:
    """All extensions with registered language rules."""
    return sorted(_REGISTRY)
