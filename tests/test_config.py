"""Tests for TOC option handling."""

from django.test import override_settings

from tocgen.config import DEFAULT_OPTIONS, TOCOptions, build_options, get_project_options


class TestBuildOptions:
    def test_defaults(self):
        options = build_options()
        assert options == TOCOptions()
        assert {name: getattr(options, name) for name in DEFAULT_OPTIONS} == DEFAULT_OPTIONS

    def test_explicit_options(self):
        options = build_options({"list_type": "ol", "toc_item_class": "item"})
        assert options.list_type == "ol"
        assert options.toc_item_class == "item"
        assert options.toc_class == "toc"

    def test_keyword_overrides_win(self):
        assert build_options({"toc_class": "a"}, toc_class="b").toc_class == "b"

    def test_invalid_list_type(self):
        assert build_options(list_type="table").list_type == "ul"

    def test_levels_are_coerced(self):
        options = build_options(min_level="3", max_level=10)
        assert options.min_level == 3
        assert options.max_level == 6
        assert build_options(min_level="abc").min_level == 1
        assert build_options(max_level=None).max_level == 6
        assert build_options(min_level=0).min_level == 1

    def test_none_class_uses_default(self):
        assert build_options(toc_class=None).toc_class == "toc"
        assert build_options(heading_class=None).heading_class == ""

    def test_unknown_keys_are_ignored(self):
        assert build_options({"colour": "blue"}) == TOCOptions()

    def test_existing_options_instance(self):
        base = TOCOptions(list_type="ol")
        assert build_options(base) is base
        assert build_options(base, toc_class="nav") == TOCOptions(list_type="ol", toc_class="nav")


class TestProjectOptions:
    def test_without_setting(self):
        assert get_project_options() == {}

    def test_from_settings(self):
        with override_settings(TOC_GENERATOR={"toc_link_class": "toc-link"}):
            assert get_project_options() == {"toc_link_class": "toc-link"}
            assert build_options().toc_link_class == "toc-link"

    def test_explicit_options_beat_settings(self):
        with override_settings(TOC_GENERATOR={"list_type": "ol", "toc_class": "x"}):
            options = build_options(toc_class="y")
            assert options.list_type == "ol"
            assert options.toc_class == "y"

    def test_non_mapping_setting_is_ignored(self):
        with override_settings(TOC_GENERATOR=["ol"]):
            assert get_project_options() == {}
