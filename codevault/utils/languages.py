"""Language name to export file extension lookup."""

from __future__ import annotations

from typing import Dict, Optional

DEFAULT_EXTENSION = "txt"

# Keyed by the display names users pass with --language.
LANGUAGE_EXTENSIONS: Dict[str, str] = {
    "AppleScript": "applescript",
    "ASP": "asp",
    "Batch File": "bat",
    "BibTeX": "bib",
    "Bourne Again Shell (bash)": "sh",
    "Bash": "sh",
    "C": "c",
    "C#": "cs",
    "C++": "cpp",
    "Cargo Build Results": "log",
    "Clojure": "clj",
    "commands-builtin-shell-bash": "sh",
    "CSS": "css",
    "D": "d",
    "Diff": "diff",
    "Erlang": "erl",
    "Go": "go",
    "Graphviz (DOT)": "dot",
    "Groovy": "groovy",
    "Haml": "haml",
    "Haskell": "hs",
    "HTML": "html",
    "Java": "java",
    "Java Properties": "properties",
    "JavaScript": "js",
    "JSON": "json",
    "LaTeX": "tex",
    "LaTeX Log": "log",
    "Lisp": "lisp",
    "Lua": "lua",
    "Make Output": "mak",
    "Makefile": "mak",
    "Markdown": "md",
    "MATLAB": "m",
    "MultiMarkdown": "mmd",
    "NAnt Build File": "build",
    "Objective-C": "m",
    "Objective-C++": "mm",
    "OCaml": "ml",
    "OCamllex": "mll",
    "OCamlyacc": "mly",
    "Pascal": "pas",
    "Perl": "pl",
    "PHP": "php",
    "Python": "py",
    "R": "R",
    "R Console": "Rout",
    "Rd (R Documentation)": "Rd",
    "Regular Expression": "regex",
    "Regular Expressions (Javascript)": "js",
    "Regular Expressions (Python)": "py",
    "reStructuredText": "rst",
    "Ruby": "rb",
    "Ruby on Rails": "rb",
    "Rust": "rs",
    "Scala": "scala",
    "Shell-Unix-Generic": "sh",
    "SQL": "sql",
    "Tcl": "tcl",
    "TeX": "tex",
    "Textile": "textile",
    "XML": "xml",
    "YAML": "yaml",
}

_CASEFOLDED: Dict[str, str] = {}
for _name, _extension in LANGUAGE_EXTENSIONS.items():
    _CASEFOLDED.setdefault(_name.casefold(), _extension)


def extension_for(language: Optional[str]) -> str:
    """Return the export extension for ``language`` (``txt`` when unknown)."""
    if not language:
        return DEFAULT_EXTENSION
    name = language.strip()
    if name in LANGUAGE_EXTENSIONS:
        return LANGUAGE_EXTENSIONS[name]
    return _CASEFOLDED.get(name.casefold(), DEFAULT_EXTENSION)


__all__ = ["DEFAULT_EXTENSION", "LANGUAGE_EXTENSIONS", "extension_for"]
