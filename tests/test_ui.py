"""Tests for the shared button component."""

from pathlib import Path

import pytest
from jinja2 import Environment, FileSystemLoader

import turismo.web.server as web_server

TEMPLATES_DIR = Path(web_server.__file__).resolve().parent / "templates"


@pytest.fixture
def env():
    return Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), autoescape=True)


def _render(env, body: str, **context) -> str:
    template = env.from_string('{% from "ui/button.html" import button %}' + body)
    return template.render(**context).strip()


def test_button_wraps_text(env):
    html = _render(env, "{% call button() %}Notifique-me{% endcall %}")
    assert html == '<button class="btn btn-primary">Notifique-me</button>'


def test_button_wraps_markup(env):
    html = _render(env, "{% call button() %}<strong>Go</strong> {{ label }}{% endcall %}", label="agora")
    assert html == '<button class="btn btn-primary"><strong>Go</strong> agora</button>'


def test_button_escapes_caller_values(env):
    html = _render(env, "{% call button() %}{{ label }}{% endcall %}", label="<b>x</b>")
    assert "&lt;b&gt;x&lt;/b&gt;" in html
