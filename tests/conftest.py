# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timezone

import pytest

from hig_content.config import Settings
from hig_content.models import Category, Platform, Section
from hig_content.processor import ContentProcessor

GUIDELINE_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>Buttons</title>
  <meta charset="utf-8">
  <style>.hero { color: red; }</style>
  <script>window.app = { route: "buttons" };</script>
</head>
<body>
  <header class="global-header">Apple Developer</header>
  <nav class="site-navigation"><a href="/">Skip Navigation</a><a href="/design">Design</a></nav>
  <main class="main-content">
    <h1>Buttons</h1>
    <p>A button initiates an instantaneous action. Buttons communicate what happens when people tap them.</p>
    <h2>Best practices</h2>
    <ul>
      <li>Make buttons easy to tap. Consider a touch target of at least 44x44 pt.</li>
      <li>Avoid using too many button styles in one view.</li>
      <li>Ensure button labels support <code>Dynamic Type</code> and VoiceOver.</li>
    </ul>
    <h2>Code example</h2>
    <pre><code class="language-swift">Button("Add") {
    addItem()
}</code></pre>
    <p>See also: <a href="/design/menus">Menus</a>, [Toggles], [Pickers]</p>
  </main>
  <footer>Copyright Apple Inc. All rights reserved.</footer>
</body>
</html>
"""

JAVASCRIPT_FALLBACK_HTML = (
    "<html><body><noscript>This page requires JavaScript. Please turn on JavaScript "
    "in your browser and refresh the page to view its content.</noscript></body></html>"
)

BUTTON_HTML = (
    "<main><h1>Button</h1><p>Use buttons to initiate actions. Consider accessibility "
    "and best practices when designing buttons.</p><h2>Guidelines</h2><ul><li>Make "
    "buttons easy to tap</li></ul></main>"
)


@pytest.fixture
def section():
    """Metadata of the Buttons page."""
    return Section(
        id="buttons",
        title="Buttons",
        url="https://developer.apple.com/design/human-interface-guidelines/buttons",
        platform=Platform.IOS,
        category=Category.SELECTION_AND_INPUT,
    )


@pytest.fixture
def guideline_html():
    """A full guideline page with chrome, lists, code and a See also line."""
    return GUIDELINE_HTML


@pytest.fixture
def javascript_fallback_html():
    """What the scraper gets when the page never rendered."""
    return JAVASCRIPT_FALLBACK_HTML


@pytest.fixture
def button_html():
    """Short Button page."""
    return BUTTON_HTML


@pytest.fixture
def config():
    """Settings with default values, isolated from the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def processor(config):
    """Content processor using default settings."""
    return ContentProcessor(config)


@pytest.fixture
def generated_at():
    """Fixed generation timestamp."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
