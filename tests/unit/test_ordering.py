from domaincheck.decoding.models import DomainRecord
from domaincheck.search.ordering import prioritize_extension


def _records(*names: str) -> list[DomainRecord]:
    return [DomainRecord(name=name, status="available") for name in names]


def _names(records: list[DomainRecord]) -> list[str]:
    return [record.name for record in records]


class TestPrioritizeExtension:
    def test_matching_entries_move_first_in_input_order(self) -> None:
        records = _records("shop.com", "shop.net", "shop.org", "myshop.net", "shop.io")
        result = prioritize_extension(records, "net")
        assert _names(result) == ["shop.net", "myshop.net", "shop.com", "shop.org", "shop.io"]

    def test_no_match_keeps_order(self) -> None:
        records = _records("a.com", "b.org")
        assert _names(prioritize_extension(records, "net")) == ["a.com", "b.org"]

    def test_all_match_keeps_order(self) -> None:
        records = _records("a.net", "b.net", "c.net")
        assert _names(prioritize_extension(records, "net")) == ["a.net", "b.net", "c.net"]

    def test_match_is_case_sensitive(self) -> None:
        records = _records("a.com", "a.NET")
        assert _names(prioritize_extension(records, "net")) == ["a.com", "a.NET"]

    def test_compares_only_last_label(self) -> None:
        records = _records("shop.com", "shop.com.tr", "shop.tr")
        assert _names(prioritize_extension(records, "com.tr")) == ["shop.com", "shop.com.tr", "shop.tr"]
        assert _names(prioritize_extension(records, "tr")) == ["shop.com.tr", "shop.tr", "shop.com"]

    def test_empty_list(self) -> None:
        assert prioritize_extension([], "com") == []

    def test_input_is_not_mutated(self) -> None:
        records = _records("a.com", "a.net")
        prioritize_extension(records, "net")
        assert _names(records) == ["a.com", "a.net"]
