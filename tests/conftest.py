"""Shared test fixtures for TagMatch."""

from __future__ import annotations

import pytest

from tagmatch.core.tokenizer import tokenize
from tagmatch.models.tokens import Token

SAMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head>
    <title>Sample Page</title>
</head>
<body>
    <div class="container">
        <h1>Welcome</h1>
        <p>This is a <strong>sample</strong> HTML page.</p>
        <ul>
            <li>Item 1</li>
            <li>Item 2</li>
        </ul>
    </div>
</body>
</html>
"""

BROKEN_HTML = """\
<html>
<body>
    <div>
        <p>Unclosed paragraph
    </span>
</body>
</html>
"""


@pytest.fixture
def sample_tokens() -> tuple[Token, ...]:
    return tokenize(SAMPLE_HTML)


@pytest.fixture
def broken_tokens() -> tuple[Token, ...]:
    return tokenize(BROKEN_HTML)
