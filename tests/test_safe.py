"""Tests for the safe fragment composition layer."""

from markupsafe import Markup

from contentful_renderer.safe import (
    SafeBuilder,
    content_tag,
    join_safes,
    make_safe,
    safe_to_string,
    void_tag,
)


class TestMakeSafe:
    def test_raw_string_is_escaped(self) -> None:
        assert make_safe("O'Brien & Co <b>") == "O&#39;Brien &amp; Co &lt;b&gt;"

    def test_double_quote_is_escaped(self) -> None:
        assert make_safe('say "hi"') == "say &#34;hi&#34;"

    def test_markup_is_verbatim(self) -> None:
        fragment = Markup("<b>&amp;</b>")
        assert make_safe(fragment) == "<b>&amp;</b>"

    def test_none_is_empty(self) -> None:
        result = make_safe(None)
        assert isinstance(result, Markup)
        assert result == ""


class TestJoinSafes:
    def test_mixed_sequence(self) -> None:
        joined = join_safes([Markup("<p>"), "a < b", None, Markup("</p>")])
        assert joined == "<p>a &lt; b</p>"
        assert isinstance(joined, Markup)

    def test_entities_in_safe_parts_are_not_reescaped(self) -> None:
        assert join_safes([Markup("&amp;lt;")]) == "&amp;lt;"

    def test_joining_twice_does_not_double_escape(self) -> None:
        once = join_safes(["&"])
        twice = join_safes([once])
        assert once == twice == "&amp;"

    def test_order_is_preserved(self) -> None:
        assert join_safes(["c", "a", "b"]) == "cab"

    def test_accepts_generators(self) -> None:
        assert join_safes(s for s in ["x", "y"]) == "xy"

    def test_empty(self) -> None:
        assert join_safes([]) == Markup("")


class TestSafeBuilder:
    def test_append_escapes_raw(self) -> None:
        sb = SafeBuilder()
        sb.append(Markup("<p>")).append("Fish & Chips").append(Markup("</p>"))
        assert sb.build() == "<p>Fish &amp; Chips</p>"

    def test_empty_values_are_skipped(self) -> None:
        sb = SafeBuilder()
        sb.append("").append(None).append(Markup(""))
        assert not sb
        assert len(sb) == 0

    def test_extend(self) -> None:
        sb = SafeBuilder().extend(["<", Markup("<br/>")])
        assert len(sb) == 2
        assert sb.build() == "&lt;<br/>"


class TestTags:
    def test_content_tag_raw(self) -> None:
        assert content_tag("p", "1 < 2") == "<p>1 &lt; 2</p>"

    def test_content_tag_safe(self) -> None:
        assert content_tag("p", Markup("<b>x</b>")) == "<p><b>x</b></p>"

    def test_content_tag_sequence(self) -> None:
        assert content_tag("li", ["a", Markup("<br/>"), None]) == "<li>a<br/></li>"

    def test_content_tag_empty(self) -> None:
        assert content_tag("p") == "<p></p>"

    def test_attributes_escaped_and_none_skipped(self) -> None:
        html = content_tag("a", "x", href="/?a=1&b=2", title=None)
        assert html == '<a href="/?a=1&amp;b=2">x</a>'

    def test_reserved_attribute_names(self) -> None:
        assert content_tag("div", "", class_="card", data_id=7) == '<div class="card" data-id="7"></div>'

    def test_void_tag(self) -> None:
        assert void_tag("hr") == "<hr/>"
        assert void_tag("img", src="a.png") == '<img src="a.png"/>'


def test_safe_to_string() -> None:
    assert safe_to_string("<") == "&lt;"
    assert type(safe_to_string(Markup("<br/>"))) is str
    assert safe_to_string(None) == ""
