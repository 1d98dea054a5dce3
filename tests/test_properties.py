"""Property-based tests for the MSON renderer using Hypothesis.

Invariants checked over generated child lists:
1. Any member child classifies the parent object-like
2. Only non-member, non-ref children classify it array-like
3. No classifying children leaves it indeterminate
4. Rendering is deterministic and always newline-terminated
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from refract_mson.config import RenderOptions
from refract_mson.elements import Element, MemberContent, Meta, RefContent
from refract_mson.renderers.mson import MsonRenderer, render_mson

_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=8)
_scalars = st.one_of(
    st.builds(lambda v: Element("string", content=v), _names),
    st.builds(lambda v: Element("number", content=v), st.integers(-1000, 1000)),
    st.builds(lambda v: Element("boolean", content=v), st.booleans()),
)
_members = st.builds(
    lambda k, v: Element("member", content=MemberContent(Element("string", content=k), v)),
    _names,
    _scalars,
)
_refs = st.builds(lambda h: Element("ref", content=RefContent(h)), _names)
_selects = st.just(Element("select"))
_children = st.lists(st.one_of(_scalars, _members, _refs, _selects), max_size=8)


class TestClassificationProperties:
    """Object/array classification of content."""

    @given(children=_children)
    @settings(max_examples=100)
    def test_classification(self, children: list[Element]) -> None:
        parent = Element("object", content=tuple(children))
        result = MsonRenderer().handle_content(parent, RenderOptions())

        tags = {child.element for child in children}
        if "member" in tags:
            assert result.is_object is True
        elif tags - {"ref", "select"}:
            assert result.is_object is False
        else:
            assert result.is_object is None

    @given(children=_children)
    @settings(max_examples=50)
    def test_one_block_per_rendered_child(self, children: list[Element]) -> None:
        parent = Element("array", content=tuple(children))
        text = MsonRenderer().handle_content(parent, RenderOptions()).text

        rendered = [c for c in children if c.element != "select"]
        assert text.count("\n") == len(rendered)
        assert all(line.startswith("    + ") for line in text.splitlines())


class TestRenderProperties:
    """Whole-tree rendering."""

    @given(children=_children, title=st.one_of(st.none(), _names))
    @settings(max_examples=50)
    def test_deterministic_and_terminated(self, children: list[Element], title: str | None) -> None:
        root = Element("object", meta=Meta(title=title), content=tuple(children))
        first = render_mson(root)
        assert first == render_mson(root)
        assert first.endswith("\n")
        assert not first.endswith("\n\n")
