"""Shared fixtures for the Folio test suite."""

import json

import pytest

from folio.config import Config


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.folio and any FOLIO_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in Config.DEFAULTS:
        monkeypatch.delenv(Config.ENV_MAPPINGS.get(key, key.upper()), raising=False)
    return home


SAMPLE_PORTFOLIO = {
    "title": "Test Portfolio",
    "photos": [
        {"title": "Harbour at dawn", "category": "Landscape", "location": "Lisbon", "featured": True},
        {"title": "Tram 28", "category": "Street", "location": "Lisbon", "featured": False},
        {"title": "Market stall", "category": "Street", "location": "Porto", "featured": False},
        {"title": "Dunes", "category": "Landscape", "location": "Sahara", "featured": True},
    ],
}

BASE_TEMPLATE = """<!DOCTYPE html>
<html><head><title>{{ title }}</title></head>
<body>{% block content %}{% endblock %}</body></html>
"""

INDEX_TEMPLATE = """{% extends "_base.html" %}
{% block content %}
<p id="featured">Featured: {{ photos | selectattr("featured") | list | length }}</p>
<ul>{% for photo in photos %}<li>{{ photo.title }}</li>{% endfor %}</ul>
{% endblock %}
"""

ABOUT_TEMPLATE = """{% extends "_base.html" %}
{% block content %}<h1>About</h1><p>{{ photos | length }} photos</p>{% endblock %}
"""


@pytest.fixture
def site_project(tmp_path):
    """A project directory with data, templates, assets and one static file."""
    project = tmp_path / "site"
    (project / "data").mkdir(parents=True)
    (project / "data" / "portfolio.json").write_text(json.dumps(SAMPLE_PORTFOLIO))

    templates = project / "templates"
    templates.mkdir()
    (templates / "_base.html").write_text(BASE_TEMPLATE)
    (templates / "index.html").write_text(INDEX_TEMPLATE)
    (templates / "about_me.html").write_text(ABOUT_TEMPLATE)

    images = project / "assets" / "images"
    images.mkdir(parents=True)
    (images / "dunes.jpg").write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")

    (project / "style.css").write_text("body { margin: 0; }\n")
    return project
