"""Tests for the typed element tree."""

import pytest

from refract_mson.elements import Element, ElementKind, MemberContent, Meta, RefContent, to_value


def _string(content: str) -> Element:
    return Element("string", content=content)


class TestElementKind:
    """Tag to kind mapping."""

    @pytest.mark.parametrize(
        ("tag", "kind"),
        [
            ("string", ElementKind.STRING),
            ("object", ElementKind.OBJECT),
            ("member", ElementKind.MEMBER),
            ("ref", ElementKind.REF),
            ("select", ElementKind.SELECT),
            ("dataStructure", ElementKind.DATA_STRUCTURE),
        ],
    )
    def test_known_tags(self, tag: str, kind: ElementKind) -> None:
        assert Element(tag).kind is kind

    def test_unknown_tag_is_other(self) -> None:
        element = Element("User")
        assert element.kind is ElementKind.OTHER
        assert element.element == "User"

    def test_other_is_not_a_tag(self) -> None:
        assert ElementKind.from_tag("other") is ElementKind.OTHER
        assert Element("other").element == "other"


class TestMeta:
    """Lazily wrapped meta values resolve to plain strings."""

    def test_plain_strings(self) -> None:
        element = Element("object", meta=Meta(title="User", description="A user"))
        assert element.title == "User"
        assert element.description == "A user"

    def test_wrapped_strings(self) -> None:
        element = Element("object", meta=Meta(id=_string("User"), title=_string("Person")))
        assert element.id == "User"
        assert element.title == "Person"

    def test_absent_is_none(self) -> None:
        element = Element("object")
        assert element.title is None
        assert element.description is None
        assert element.id is None


class TestAttributes:
    """Attribute lookup."""

    def test_absent_attributes(self) -> None:
        assert Element("string").attribute("default") is None

    def test_missing_attribute(self) -> None:
        assert Element("string", attributes={}).attribute("default") is None

    def test_wrapped_attribute(self) -> None:
        element = Element("number", attributes={"default": Element("number", content=5)})
        assert element.attribute("default") == 5

    def test_type_attributes_array(self) -> None:
        element = Element(
            "member",
            attributes={"typeAttributes": Element("array", content=(_string("required"),))},
        )
        assert element.attribute("typeAttributes") == ["required"]


class TestContent:
    """Content shape helpers."""

    def test_scalar_content(self) -> None:
        assert Element("number", content=42).has_scalar_content
        assert Element("boolean", content=False).has_scalar_content

    def test_no_content_is_not_scalar(self) -> None:
        assert not Element("string").has_scalar_content

    def test_sequence_is_not_scalar(self) -> None:
        element = Element("array", content=(_string("a"),))
        assert not element.has_scalar_content
        assert element.children == (_string("a"),)

    def test_absent_and_empty_content_are_distinct(self) -> None:
        assert Element("array").content is None
        assert Element("array", content=()).content == ()
        assert Element("array").children == ()
        assert Element("array", content=()).children == ()

    def test_wrapped_element_is_single_child(self) -> None:
        body = Element("object")
        assert Element("dataStructure", content=body).children == (body,)

    def test_member_and_ref_have_no_children(self) -> None:
        member = Element("member", content=MemberContent(_string("a"), _string("b")))
        ref = Element("ref", content=RefContent("Pagination"))
        assert member.children == ()
        assert ref.children == ()

    def test_enum_enumerations(self) -> None:
        options = (_string("red"), _string("green"))
        enum = Element(
            "enum",
            attributes={"enumerations": Element("array", content=options)},
            content=_string("red"),
        )
        assert enum.children == options

    def test_enum_sequence_content_wins(self) -> None:
        enum = Element("enum", content=(_string("red"),))
        assert enum.children == (_string("red"),)


class TestUnwrapped:
    """dataStructure unwrapping."""

    def test_wrapped_element(self) -> None:
        body = Element("object")
        assert Element("dataStructure", content=body).unwrapped() is body

    def test_single_item_sequence(self) -> None:
        body = Element("object")
        assert Element("dataStructure", content=(body,)).unwrapped() is body

    def test_other_kinds_unchanged(self) -> None:
        element = Element("object", content=(Element("string"),))
        assert element.unwrapped() is element


class TestToValue:
    """Value resolution."""

    def test_scalar(self) -> None:
        assert to_value("x") == "x"
        assert to_value(None) is None

    def test_nested(self) -> None:
        value = Element(
            "array",
            content=(Element("number", content=1), Element("array", content=(_string("a"),))),
        )
        assert to_value(value) == [1, ["a"]]

    def test_member(self) -> None:
        member = Element("member", content=MemberContent(_string("id"), Element("number", content=1)))
        assert to_value(member) == {"id": 1}

    def test_ref(self) -> None:
        assert to_value(Element("ref", content=RefContent("Pagination"))) == "Pagination"
