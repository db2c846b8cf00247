"""Unit tests for the Jinja2 view renderer and the shipped templates."""

from blog.application.schemas import ArticleFormData
from blog.infrastructure.templating import JinjaViewRenderer


def test_create_form_renders_values_and_errors():
    form = ArticleFormData(
        title="Hi",
        body="1234567890",
        url="/articles",
        errors={"title": "title length out of range"},
    )
    html = JinjaViewRenderer().render("articles/create.html", form.model_dump()).decode("utf-8")

    assert 'action="/articles"' in html
    assert 'value="Hi"' in html
    assert "1234567890" in html
    assert "title length out of range" in html


def test_edit_form_without_errors():
    form = ArticleFormData(title="A title", body="Some body text", url="/articles/7")
    html = JinjaViewRenderer().render("articles/edit.html", form.model_dump()).decode("utf-8")

    assert 'action="/articles/7"' in html
    assert 'class="error"' not in html


def test_show_escapes_user_content():
    data = {
        "article": {"id": 3, "title": "<script>alert(1)</script>", "body": "Tom & Jerry"},
        "edit_url": "/articles/3/edit",
    }
    html = JinjaViewRenderer().render("articles/show.html", data).decode("utf-8")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "Tom &amp; Jerry" in html


def test_renderer_reads_templates_from_custom_directory(tmp_path):
    (tmp_path / "hello.html").write_text("Hello {{ name }}", encoding="utf-8")
    renderer = JinjaViewRenderer(templates_dir=tmp_path)
    assert renderer.render("hello.html", {"name": "Ünïcode"}) == "Hello Ünïcode".encode("utf-8")
