"""Tests for the rendering-pipeline postprocessor."""

from tocgen.postprocessor import toc_postprocessor, toc_postprocessor_default


class TestTocPostprocessor:
    def test_publishes_toc_in_context(self):
        context = {}
        html = toc_postprocessor_default("<h2>Setup</h2><h3>Install</h3>", context)

        assert html == '<h2 id="setup">Setup</h2><h3 id="install">Install</h3>'
        assert context["toc_html"] == (
            '<ul class="toc"><li><a href="#setup">Setup</a>'
            '<ul><li><a href="#install">Install</a></li></ul></ul>'
        )
        assert context["toc"] == [
            {"level": 1, "text": "Setup", "anchor": "setup"},
            {"level": 2, "text": "Install", "anchor": "install"},
        ]

    def test_context_options_take_precedence(self):
        context = {"toc_options": {"toc_class": "from-context"}}
        toc_postprocessor("<h1>A</h1>", context, options={"toc_class": "from-call", "list_type": "ol"})
        assert context["toc_html"] == '<ol class="from-context"><li><a href="#a">A</a></ol>'

    def test_empty_html(self):
        context = {}
        assert toc_postprocessor_default("", context) == ""
        assert context["toc_html"] == ""
        assert context["toc"] == []
