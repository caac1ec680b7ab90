"""
Navigator constants and configuration.

Contains repository root markers, key document patterns, traversal limits,
directory block-lists and the source extension allow-list.
"""

import re

# ─────────────────────────────────────────────────────────────
# Repository Root Detection
# ─────────────────────────────────────────────────────────────

# Checked in this order inside each directory; the nearest directory wins
REPOSITORY_MARKERS = [
    ".git",
    "package.json",
    "pyproject.toml",
    "Cargo.toml",
    "pom.xml",
    "build.gradle",
    "go.mod",
    "composer.json",
    "Gemfile",
    ".gitignore",
    "README.md",
]


# ─────────────────────────────────────────────────────────────
# Traversal Limits
# ─────────────────────────────────────────────────────────────

# Deepest directory level entered by the locators (root is depth 0)
MAX_SCAN_DEPTH = 10


# ─────────────────────────────────────────────────────────────
# Key Documents
# ─────────────────────────────────────────────────────────────

KEY_DOC_PATTERNS = [
    re.compile(r"^readme\.md$", re.IGNORECASE),
    re.compile(r"^architecture\.md$", re.IGNORECASE),
    re.compile(r"^planning\.md$", re.IGNORECASE),
    re.compile(r"^design\.md$", re.IGNORECASE),
    re.compile(r"^prd\.md$", re.IGNORECASE),
    re.compile(r"^contributing\.md$", re.IGNORECASE),
    re.compile(r"^agents\.md$", re.IGNORECASE),
    re.compile(r"^tasks\.md$", re.IGNORECASE),
    re.compile(r"copilot-instructions\.md$", re.IGNORECASE),
    re.compile(r"claude\.md$", re.IGNORECASE),
]

DOC_SKIP_DIRS = frozenset({"node_modules", ".git", "dist", "build"})


# ─────────────────────────────────────────────────────────────
# Source Files
# ─────────────────────────────────────────────────────────────

SOURCE_SKIP_DIRS = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        "__pycache__",
        "target",
        "bin",
        "obj",
        ".vscode",
        ".idea",
        "vendor",
        ".gradle",
        ".maven",
        "cmake-build-debug",
        ".venv",
        "venv",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        ".next",
    }
)

SOURCE_EXTENSIONS = (
    # Web
    ".ts",
    ".js",
    ".tsx",
    ".jsx",
    ".vue",
    ".svelte",
    # Backend
    ".py",
    ".java",
    ".go",
    ".rs",
    ".cpp",
    ".c",
    ".cs",
    ".php",
    ".rb",
    # Mobile
    ".swift",
    ".kt",
    ".dart",
    # Functional
    ".hs",
    ".elm",
    ".clj",
    ".ml",
    ".fs",
    # Data & config
    ".sql",
    ".json",
    ".yaml",
    ".yml",
    ".toml",
    ".xml",
    # Shell & scripts
    ".sh",
    ".bash",
    ".ps1",
    ".bat",
    # Headers
    ".h",
    ".hpp",
    ".hxx",
)


# ─────────────────────────────────────────────────────────────
# Structure Listing
# ─────────────────────────────────────────────────────────────

# Directories hidden from the tree listing
STRUCTURE_IGNORE = ("node_modules", "__pycache__", "dist", "build", ".git")

STRUCTURE_UNAVAILABLE = "Unable to generate project structure"


# ─────────────────────────────────────────────────────────────
# Entry Point Detection
# ─────────────────────────────────────────────────────────────

# Any of these in the lower-cased relative path flags an entry point
ENTRY_POINT_NAMES = ("index", "main", "app", "server", "program")


# ─────────────────────────────────────────────────────────────
# Report Limits
# ─────────────────────────────────────────────────────────────

MAX_DOC_SUMMARIES = 5
DOC_SUMMARY_MIN_CHARS = 20
DOC_SUMMARY_MAX_CHARS = 150

MAX_LISTED_DEPENDENCIES = 30
MAX_LISTED_ELEMENTS = 30
MAX_METHOD_PREVIEW = 5

# Files longer than this get a short content preview in the analysis phase
PREVIEW_MIN_LINES = 100
MAX_PREVIEW_FILES = 5
PREVIEW_LINES = 5

LARGEST_FILES_LIMIT = 5

# Complexity thresholds on total line count
COMPLEXITY_MEDIUM_THRESHOLD = 1000
COMPLEXITY_HIGH_THRESHOLD = 5000

SYNTHESIS_RECENT_RECORDS = 3


# ─────────────────────────────────────────────────────────────
# Idiom Detection Patterns
# ─────────────────────────────────────────────────────────────

# Ordered; every tag whose patterns hit is reported
IDIOM_INDICATORS: dict[str, list[str]] = {
    "OOP/Classes": [r"\bclass\s+\w+"],
    "Functions": [
        r"\bfunction\s+\w+",
        r"\bconst\s+\w+\s*=.*=>",
        r"(?m)^[ \t]*(?:async\s+)?def\s+\w+\s*\(",
        r"\bfunc\s+\w+\s*\(",
        r"\bfn\s+\w+\s*[(<]",
    ],
    "ES6 Modules": [r"(?m)^[ \t]*export\s+", r"(?m)^[ \t]*import\s+[^;\n]*\s+from\s+['\"]"],
    "Async/Promises": [r"\.then\(", r"\basync\s+", r"\bawait\s+"],
    "React": [r"\bReact\.", r"\buseState\b", r"\buseEffect\b", r"from\s+['\"]react['\"]"],
    "Express.js": [
        r"express\(\)",
        r"\bapp\.(?:get|post|put|delete)\s*\(",
        r"require\(\s*['\"]express['\"]\s*\)",
    ],
    "SQL/Database": [
        r"(?i)\bSELECT\b[\s\S]{1,200}?\bFROM\b",
        r"(?i)\bINSERT\s+INTO\b",
        r"(?i)\bUPDATE\s+\w+\s+SET\b",
        r"(?i)\bDELETE\s+FROM\b",
        r"(?i)\bCREATE\s+TABLE\b",
    ],
    "Testing": [
        r"\b(?:describe|it|test)\s*\(\s*['\"`]",
        r"(?m)^[ \t]*(?:async\s+)?def\s+test_\w+",
        r"@Test\b",
        r"#\[test\]",
        r"\bfunc\s+Test\w+\s*\(",
        r"\bimport\s+pytest\b",
    ],
    "Django": [r"\bfrom\s+django\b", r"\bimport\s+django\b"],
    "Flask": [r"\bfrom\s+flask\s+import\b", r"\bFlask\(__name__\)"],
    "FastAPI": [r"\bfrom\s+fastapi\b", r"\bFastAPI\("],
    "Spring Framework": [
        r"@(?:SpringBootApplication|RestController|Controller|Service|Repository|Autowired|"
        r"RequestMapping|GetMapping|PostMapping|Component)\b"
    ],
    "Go Concurrency": [r"\bgo\s+func\s*\(", r"\bmake\(\s*chan\b", r"\bchan\s+\w+", r"<-\s*\w+"],
    "Go Error Handling": [r"\bif\s+err\s*!=\s*nil\b"],
    "Rust Traits": [
        r"(?m)^[ \t]*(?:pub\s+)?trait\s+\w+",
        r"(?m)^[ \t]*impl(?:<[^>]*>)?\s+\w+(?:<[^>]*>)?\s+for\s+\w+",
    ],
    "Rust Error Handling": [r"\bResult<", r"\.unwrap\(\)", r"\.expect\(\"", r"\)\?;"],
    "C++ STL": [
        r"\bstd::(?:vector|map|unordered_map|set|unordered_set|string|list|deque|"
        r"shared_ptr|unique_ptr|array|pair)\b",
        r"#include\s*<(?:vector|map|algorithm|unordered_map|memory)>",
    ],
    "Kubernetes Manifests": [
        r"(?m)^kind:\s*(?:Deployment|Service|Pod|ConfigMap|Ingress|StatefulSet|DaemonSet|Job|CronJob)\b"
    ],
    "Infrastructure as Code": [
        r"(?m)^[ \t]*resource\s+\"\w+\"\s+\"\w+\"",
        r"(?m)^[ \t]*provider\s+\"\w+\"",
        r"\bAWSTemplateFormatVersion\b",
        r"\bimport\s+pulumi\b",
    ],
    "Docker Compose": [r"(?m)^services:[ \t]*\n(?:[ \t]+\S[^\n]*\n|[ \t]*\n)*?[ \t]+(?:image|build):"],
}


# ─────────────────────────────────────────────────────────────
# Architecture Detection Patterns
# ─────────────────────────────────────────────────────────────

ARCHITECTURE_INDICATORS: dict[str, list[str]] = {
    "Server Architecture": [
        r"server\s*=\s*new\s+Server",
        r"\bcreateServer\(",
        r"express\(\)",
        r"require\(\s*['\"]express['\"]\s*\)",
        r"from\s+['\"]express['\"]",
        r"\b(?:app|server)\.listen\(",
        r"\buvicorn\.run\(",
        r"\bhttp\.ListenAndServe\(",
        r"@SpringBootApplication\b",
        r"\bFastAPI\(",
        r"\bFlask\(__name__\)",
    ],
    "Routing Pattern": [
        r"\brouter\.",
        r"\bRouter\(",
        r"\bapp\.use\b",
        r"\bapp\.(?:get|post|put|patch|delete)\s*\(",
        r"@(?:app|router|bp|blueprint)\.(?:get|post|put|patch|delete|route)\(",
        r"@(?:Get|Post|Put|Delete|Request)Mapping\b",
    ],
    "Middleware Pattern": [r"(?i)\bmiddleware\b", r"\bapp\.use\("],
    "Controller Pattern": [r"\bclass\s+\w*Controller\b", r"@(?:Rest)?Controller\b"],
    "Service Layer Pattern": [r"\bclass\s+\w*Service\b", r"@Service\b", r"@Injectable\("],
    "Repository Pattern": [r"\bclass\s+\w*Repository\b", r"@Repository\b"],
    "Reactive Programming": [
        r"\bObservable\b",
        r"\b(?:Behavior|Replay|Async)?Subject\s*[<(]",
        r"\.pipe\(",
    ],
    "React Hooks Pattern": [r"\buse(?:State|Effect|Context|Reducer|Memo|Callback|Ref)\s*\("],
    "Error Handling": [
        r"\btry\s*\{[\s\S]*?\bcatch\s*[({]",
        r"(?m)^[ \t]*try[ \t]*:[ \t]*$[\s\S]*?^[ \t]*except\b",
        r"\bif\s+err\s*!=\s*nil\b",
        r"(?m)^[ \t]*rescue\b",
    ],
    "Logging": [
        r"\blogger\.",
        r"\bconsole\.",
        r"\blogging\.",
        r"\blog\.(?:Print|Fatal|Info|Debug|Warn|Error)",
        r"\blog::",
    ],
    "Configuration Management": [
        r"\bprocess\.env\b",
        r"\bconfig\.",
        r"\b\w*Config\b",
        r"\bos\.environ\b",
        r"\bos\.getenv\(",
        r"\bsettings\.",
    ],
    "MCP Server Pattern": [
        r"\bTool\[\]",
        r"\btools\s*:",
        r"\bsetRequestHandler\(",
        r"@mcp\.tool\b",
        r"\bFastMCP\(",
    ],
}
