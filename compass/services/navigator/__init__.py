"""
Codebase navigator package for phased, heuristic repository analysis.

Walks a local repository through four phases (conceptual, structural,
analysis, synthesis) and renders onboarding reports. All code analysis is
regex-based text matching; nothing is parsed into an AST.

Module structure:
- orchestrator.py: Main CodebaseNavigator class
- session.py: Append-only analysis history
- discovery.py: Repository root, key document and source file discovery
- structure.py: Directory tree listing
- analyzer.py: CodeAnalyzer running the per-file passes
- languages.py: Per-language regex registry
- dependencies.py / entry_points.py / elements.py: Per-file extraction
- patterns.py: Idiom and architecture tagging
- aggregator.py: Structure statistics and complexity
- reports.py: Phase and comprehensive report rendering
- constants.py: Markers, patterns, limits and indicator tables
"""

from compass.services.navigator.aggregator import build_code_structure, classify_complexity
from compass.services.navigator.analyzer import CodeAnalyzer
from compass.services.navigator.dependencies import extract_dependencies
from compass.services.navigator.discovery import (
    detect_root_marker,
    find_key_docs,
    find_repository_root,
    find_source_files,
    read_file_record,
)
from compass.services.navigator.elements import extract_code_elements
from compass.services.navigator.entry_points import is_entry_point
from compass.services.navigator.exceptions import (
    InvalidInputError,
    NavigatorError,
    UnsupportedPhaseError,
)
from compass.services.navigator.orchestrator import CodebaseNavigator
from compass.services.navigator.patterns import detect_architecture, detect_idioms
from compass.services.navigator.session import AnalysisSession
from compass.services.navigator.structure import render_project_structure
from compass.services.navigator.types import AnalysisPhase, Complexity

__all__ = [
    # Main classes
    "CodebaseNavigator",
    "CodeAnalyzer",
    "AnalysisSession",
    # Types
    "AnalysisPhase",
    "Complexity",
    # Discovery
    "find_repository_root",
    "detect_root_marker",
    "find_key_docs",
    "find_source_files",
    "read_file_record",
    "render_project_structure",
    # Extraction functions
    "extract_dependencies",
    "is_entry_point",
    "detect_idioms",
    "detect_architecture",
    "extract_code_elements",
    "build_code_structure",
    "classify_complexity",
    # Errors
    "NavigatorError",
    "InvalidInputError",
    "UnsupportedPhaseError",
]
