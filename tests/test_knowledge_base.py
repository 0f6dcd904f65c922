import pytest

from barangay_case.categories import CaseCategory
from barangay_case.knowledge_base import LEGAL_DATA, categories, knowledge_base_metadata, lookup


@pytest.mark.parametrize("category", list(CaseCategory))
def test_lookup_is_total(category):
    record = lookup(category)
    assert record is not None
    assert record.nature
    assert record.violations


@pytest.mark.parametrize("category", [
    CaseCategory.THEFT, CaseCategory.THREAT, CaseCategory.DEFAMATION, CaseCategory.INJURY,
])
def test_specific_categories_have_counters(category):
    assert lookup(category).counters


def test_general_has_no_jurisprudence_or_counters():
    record = lookup(CaseCategory.GENERAL)
    assert record.jurisprudence == ()
    assert record.counters == ()
    assert "Lupong Tagapamayapa" in record.violations[0].text


def test_theft_record_contents():
    record = lookup(CaseCategory.THEFT)
    assert record.nature == "Theft / Qualified Theft"
    assert [v.basis for v in record.violations] == [
        "Revised Penal Code Art. 308",
        "San\xa0Pedro City Ordinance\xa0No.\xa02024‑13",
    ]
    assert record.jurisprudence[0].title.startswith("Sonia\xa0Balagtas\xa0v.\xa0People")
    assert [c.title for c in record.counters] == ["Malicious mischief", "False accusation / Oral defamation"]


def test_injury_has_no_jurisprudence():
    assert lookup(CaseCategory.INJURY).jurisprudence == ()


def test_table_is_read_only():
    with pytest.raises(TypeError):
        LEGAL_DATA[CaseCategory.GENERAL] = lookup(CaseCategory.THEFT)  # type: ignore[index]
    with pytest.raises(Exception):
        lookup(CaseCategory.THEFT).nature = "changed"  # type: ignore[misc]


def test_metadata_and_listing():
    meta = knowledge_base_metadata()
    assert meta["num_categories"] == 5
    assert meta["categories"]["general"] == {"violations": 2, "jurisprudence": 0, "counters": 0}
    assert [c["id"] for c in categories()] == ["theft", "threat", "defamation", "injury", "general"]


def test_legal_text_keeps_non_breaking_spaces():
    threat = lookup(CaseCategory.THREAT)
    assert threat.jurisprudence[0].title == "Paera\xa0v.\xa0People (G.R.\xa0No.\xa0181626)"
    assert threat.violations[0].basis == "Revised Penal Code Art.\xa0282"
    assert "arresto\xa0mayor" in lookup(CaseCategory.THEFT).violations[0].penalty
    assert lookup(CaseCategory.INJURY).violations[0].penalty.startswith("Arresto\xa0menor (1–30\xa0days)")
