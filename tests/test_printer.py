import json

import pytest

from famtree_py.builder import build_registry
from famtree_py.printer import emission_order, format_person, render
from famtree_py.records import read_records
from famtree_py.registry import Registry


def _build(lines):
    return build_registry(read_records(lines))


def test_parents_are_emitted_before_children(family_lines):
    reg = _build(family_lines)
    order = [p.name for p in emission_order(reg)]
    assert order == ["Grandpa Joe", "Grandma Ann", "Mary", "Joe Junior", "Lily"]
    pos = {name: i for i, name in enumerate(order)}
    for p in reg.all_persons():
        for parent in (p.father, p.mother):
            if parent:
                assert pos[parent] < pos[p.name]


def test_every_person_emitted_exactly_once(family_lines):
    reg = _build(family_lines)
    order = [p.name for p in emission_order(reg)]
    assert sorted(order) == sorted(p.name for p in reg.all_persons())
    assert len(order) == len(set(order))


def test_child_declared_first_still_waits_for_parents():
    reg = _build(["PERSON Kid", "FATHER Dad", "MOTHER Mum"])
    assert [p.name for p in emission_order(reg)] == ["Dad", "Mum", "Kid"]


def test_deferred_person_is_not_requeued_without_child_link():
    reg = Registry()
    kid = reg.lookup_or_create("Kid")
    reg.lookup_or_create("Dad")
    # father set without linking Kid into Dad's children
    kid.father = "Dad"
    assert [p.name for p in emission_order(reg)] == ["Dad"]


def test_unknown_parent_name_does_not_block():
    reg = Registry()
    kid = reg.lookup_or_create("Kid")
    kid.mother = "Nobody"
    assert [p.name for p in emission_order(reg)] == ["Kid"]


def test_format_person_without_children():
    reg = _build(["PERSON Lily", "SEX F"])
    assert format_person(reg.lookup("Lily")) == (
        "Lily\n"
        " Sex: Female\n"
        " Father: Unknown\n"
        " Mother: Unknown\n"
        " Children: None\n"
    )


def test_render_text_blocks():
    reg = _build(["PERSON Bob Smith", "FATHER_OF Ann", "FATHER_OF Tom"])
    assert render(reg, "text") == (
        "Bob Smith\n"
        " Sex: Male\n"
        " Father: Unknown\n"
        " Mother: Unknown\n"
        " Children: \n"
        "\tAnn\n"
        "\tTom\n"
        "\n"
        "Ann\n"
        " Sex: Unknown\n"
        " Father: Bob Smith\n"
        " Mother: Unknown\n"
        " Children: None\n"
        "\n"
        "Tom\n"
        " Sex: Unknown\n"
        " Father: Bob Smith\n"
        " Mother: Unknown\n"
        " Children: None\n"
        "\n"
    )


def test_render_json(family_lines):
    data = json.loads(render(_build(family_lines), "json"))
    assert [d["name"] for d in data] == ["Grandpa Joe", "Grandma Ann", "Mary", "Joe Junior", "Lily"]
    lily = data[-1]
    assert lily == {"name": "Lily", "sex": "Female", "father": "Joe Junior", "mother": "Mary", "children": []}


def test_render_html_escapes_names():
    reg = _build(["PERSON <b>Bold</b>", "SEX M"])
    html = render(reg, "html")
    assert "&lt;b&gt;Bold&lt;/b&gt;" in html
    assert "<b>Bold</b>" not in html
    assert "Male" in html


def test_render_unknown_format():
    with pytest.raises(ValueError):
        render(Registry(), "xml")


def test_empty_registry_renders_nothing():
    assert render(Registry(), "text") == ""
