from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared source samples exercised by the scanner and renderer suites.
3. Offline token counting for anything that computes statistics.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Samples
# -----------------------------------------------------------------------------
SOURCE_SAMPLES: List[str] = [
    "",
    "   \n\n\t ",
    "function greet(name){if(name){doA();}else{doB();}}",
    "// comment\ncodeLine();",
    'const s = "{not a brace}";',
    "function greet(name){if(name){console.log('Hello, '+name+'!');}else{console.log('Hello, World!');}}",
    (
        "const users = [{name: 'John', age: 30}, {name: 'Jane', age: 25}]; "
        "const adults = users.filter(user => user.age >= 18).map(user => ({...user, isAdult: true})); "
        "console.log(adults);"
    ),
    (
        "class Calculator { constructor() { this.result = 0; } add(x, y) { this.result = x + y; "
        "return this; } multiply(x) { this.result *= x; return this; } getResult() { return this.result; } }"
    ),
    (
        "async function fetchData(url) { try { const response = await fetch(url); if (!response.ok) "
        "{ throw new Error(`HTTP error! status: ${response.status}`); } const data = await response.json(); "
        "return data; } catch (error) { console.error('Fetch error:', error); throw error; } }"
    ),
    (
        "// header\n"
        "const re = /[a-z]+\\/x/gi; // trailing\n"
        "const half = total / 2;\n"
        "/* block\n   comment */\n"
        "function f(a, b) { return a / b; }\n"
    ),
    "const t = `line one   \n    line two {`;\nlet x = 'it\\'s } here';\n\n\n\nx++;",
    "if (a) {\n  b();\n}}}\nc();",
    "let unterminated = \"never closed {",
    "x = a /* never closed",
]


@pytest.fixture(params=SOURCE_SAMPLES, ids=lambda s: repr(s[:24]))
def source_sample(request: pytest.FixtureRequest) -> str:
    """Yield each shared source sample in turn."""
    return request.param


@pytest.fixture
def fake_token_count(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace the BPE token counter used by statistics with len(text)."""
    monkeypatch.setattr(
        "scriptfmt.core.analysis.stats.count_tokens",
        lambda text, model="": len(text),
    )


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys of 'scriptfmt.domain.config.get_default_config'.
    """
    return {
        # IO Paths
        "input_path": "/tmp/test_input.js",
        "output_path": "",

        # Rendering
        "mode": "minify",
        "indent_size": 4,

        # Reporting
        "show_stats": True,
        "target_model": "gpt-4o",
    }
