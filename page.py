# link-shortener/page.py
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

STATIC_DIR = Path(__file__).resolve().parent / "static"


def render_index_page(static_dir: Path = STATIC_DIR) -> str:
    """
    Builds the submission page: index.html with style.css and script.js
    inlined into its <style> and <script> blocks.
    """
    env = Environment(
        loader=FileSystemLoader(str(static_dir)),
        autoescape=False,  # css/js are inserted verbatim
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    template = env.get_template("index.html")
    return template.render(
        style=(static_dir / "style.css").read_text(encoding="utf-8"),
        script=(static_dir / "script.js").read_text(encoding="utf-8"),
    )


# Rendered once; the page never changes while the process runs
INDEX_HTML = render_index_page()
