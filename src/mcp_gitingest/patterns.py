from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Language(str, Enum):
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    GO = "go"
    RUST = "rust"
    JAVA = "java"
    CSHARP = "csharp"


LANGUAGE_PATTERNS: Dict[Language, Tuple[str, ...]] = {
    Language.PYTHON: ("*.py",),
    Language.JAVASCRIPT: ("*.js", "*.mjs"),
    Language.TYPESCRIPT: ("*.ts", "*.tsx"),
    Language.GO: ("*.go",),
    Language.RUST: ("*.rs",),
    Language.JAVA: ("*.java",),
    Language.CSHARP: ("*.cs",),
}

_missing = [lang.value for lang in Language if lang not in LANGUAGE_PATTERNS]
if _missing:
    raise RuntimeError(f"LANGUAGE_PATTERNS has no entry for: {', '.join(_missing)}")

# analyze_code_files
CODE_EXCLUDE_PATTERNS: Tuple[str, ...] = ("node_modules/*", "dist/*", "build/*", "*.min.js")
CODE_MAX_FILE_SIZE = 102400  # 100KB per file

# get_repo_docs
DOCS_INCLUDE_PATTERNS: Tuple[str, ...] = ("*.md", "*.mdx", "*.txt", "LICENSE*", "README*")
DOCS_MAX_FILE_SIZE = 51200  # 50KB per file

# get_repo_structure: keeps tree + summary, drops practically all file content
STRUCTURE_MAX_FILE_SIZE = 1


def patterns_for(language: Language | str) -> list[str]:
    """Include patterns for `language`, as a fresh list."""
    return list(LANGUAGE_PATTERNS[Language(language)])
