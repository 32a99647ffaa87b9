# link-shortener/tests/test_page.py
from page import INDEX_HTML, STATIC_DIR, render_index_page


def test_index_page_inlines_assets():
    style = (STATIC_DIR / "style.css").read_text(encoding="utf-8")
    script = (STATIC_DIR / "script.js").read_text(encoding="utf-8")
    assert style in INDEX_HTML
    assert script in INDEX_HTML
    assert INDEX_HTML.index("<style>") < INDEX_HTML.index(style) < INDEX_HTML.index("</style>")
    assert INDEX_HTML.index("<script>") < INDEX_HTML.index(script) < INDEX_HTML.index("</script>")


def test_render_from_other_directory(tmp_path):
    (tmp_path / "index.html").write_text("<style>{{ style }}</style><script>{{ script }}</script>")
    (tmp_path / "style.css").write_text("a { color: red; }")
    (tmp_path / "script.js").write_text("if (a < b && c > d) {}")
    html = render_index_page(tmp_path)
    # assets go in verbatim, no html escaping
    assert html == "<style>a { color: red; }</style><script>if (a < b && c > d) {}</script>"
