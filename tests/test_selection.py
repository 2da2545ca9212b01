from itemcatalog.selection import Selection, aggregate_selection, format_attribute, format_summary

ITEM_A = {"id": "A", "gold": {"total": 1300}, "attributes": [{"descricao": "Poder", "valor": 120}]}
ITEM_B = {
    "id": "B",
    "gold": {"total": 2600},
    "attributes": [{"descricao": "Poder", "valor": 40}, {"descricao": "Vida", "valor": 300}],
}
ITEM_C = {"id": "C", "gold": {"total": 500}, "attributes": []}


def test_aggregate_sums_gold_and_attributes():
    summary = aggregate_selection([ITEM_A, ITEM_B, ITEM_C], ["A", "B"])
    assert summary == {"total_gold": 3900, "attributes": {"Poder": 160, "Vida": 300}}


def test_aggregate_empty_selection():
    assert aggregate_selection([ITEM_A, ITEM_B], []) == {"total_gold": 0, "attributes": {}}
    assert aggregate_selection([], ["A"]) == {"total_gold": 0, "attributes": {}}


def test_aggregate_ignores_unknown_ids_and_order():
    forward = aggregate_selection([ITEM_A, ITEM_B], ["A", "B", "missing"])
    backward = aggregate_selection([ITEM_B, ITEM_A], ["B", "A"])
    assert forward == backward


def test_aggregate_sums_duplicate_labels_within_an_item():
    item = {
        "id": "D",
        "gold": {"total": 100},
        "attributes": [{"descricao": "Vida", "valor": 10}, {"descricao": "Vida", "valor": 5}],
    }
    assert aggregate_selection([item], ["D"])["attributes"] == {"Vida": 15}


def test_selection_ignores_additions_past_capacity():
    selection = Selection(["1", "2", "3", "4", "5", "6"])
    assert selection.is_full
    assert selection.add("7") is False
    assert selection.ids == ["1", "2", "3", "4", "5", "6"]


def test_selection_constructor_applies_capacity():
    selection = Selection([str(n) for n in range(10)])
    assert len(selection) == 6
    assert selection.ids == ["0", "1", "2", "3", "4", "5"]


def test_selection_toggle_and_duplicates():
    selection = Selection()
    assert selection.add("1")
    assert not selection.add("1")
    assert selection.toggle("2")
    assert "2" in selection
    assert selection.toggle("2")
    assert "2" not in selection
    selection.clear()
    assert list(selection) == []


def test_format_attribute_uses_percent_table():
    assert format_attribute("Tenacidade", 20)["display"] == "20%"
    assert format_attribute("Vida", 300) == {
        "descricao": "Vida",
        "valor": 300,
        "percent": False,
        "display": "300",
    }
    assert format_attribute("Vida", 300, {"Vida"})["display"] == "300%"


def test_format_summary_lists_every_label():
    summary = aggregate_selection([ITEM_A, ITEM_B], ["A", "B"])
    labels = {entry["descricao"]: entry["valor"] for entry in format_summary(summary)}
    assert labels == {"Poder": 160, "Vida": 300}
