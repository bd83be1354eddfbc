"""정렬 비교기 테스트"""

import functools
import itertools
import pickle

import pytest

from book_isbn import (
    Isbn,
    Isbn10,
    Isbn13,
    IsbnComparator,
    IsbnConsistencyError,
    Version,
    comparator,
)

EXAMPLES = [
    Isbn10("3030516717"),
    Isbn13("978-0750709026"),
    Isbn13("978-1465480248"),
    Isbn10("0439023483"),
    Isbn13("9780439023481"),
    Isbn13("9798886451740"),
    Isbn13("9791234567896"),
]


class TestComparatorContract:
    """전순서 계약"""

    def test_singleton(self):
        assert comparator() is IsbnComparator.INSTANCE
        assert pickle.loads(pickle.dumps(comparator())) is IsbnComparator.INSTANCE

    def test_reflexive(self):
        cmp = comparator()
        for isbn in EXAMPLES:
            assert cmp(isbn, isbn) == 0

    def test_antisymmetric(self):
        cmp = comparator()
        for a, b in itertools.product(EXAMPLES, repeat=2):
            assert cmp(a, b) == -cmp(b, a)

    def test_transitive(self):
        cmp = comparator()
        for a, b, c in itertools.product(EXAMPLES, repeat=3):
            if cmp(a, b) <= 0 and cmp(b, c) <= 0:
                assert cmp(a, c) <= 0

    def test_isbn10_is_order_equivalent_to_isbn13(self):
        """ISBN-10과 대응 ISBN-13은 같은 위치"""
        assert comparator().compare(Isbn10("0439023483"), Isbn13("9780439023481")) == 0

    def test_978_precedes_979(self):
        cmp = comparator()
        for a, b in itertools.product(EXAMPLES, repeat=2):
            if cmp.key(a).startswith("978") and cmp.key(b).startswith("979"):
                assert cmp(a, b) < 0

    def test_key_is_canonical_isbn13(self):
        assert comparator().key(Isbn10("316148410X")) == "9783161484100"
        assert comparator().key(Isbn13("9798886451740")) == "9798886451740"


class TestSorting:
    """정렬 결과"""

    def test_sorting_mixed_versions(self):
        isbns = [
            Isbn13("9798886451740"),
            Isbn10("0439023483"),
            Isbn13("9780439023481"),
        ]

        assert sorted(isbns) == [
            Isbn10("0439023483"),
            Isbn13("9780439023481"),
            Isbn13("9798886451740"),
        ]

    @pytest.mark.parametrize(
        "unsorted, expected",
        [
            (
                ["0439023483", "9780439023481", "9783161484100", "9798886451740"],
                ["0439023483", "9780439023481", "9783161484100", "9798886451740"],
            ),
            (
                ["9798886451740", "316148410X", "9780306406157"],
                ["9780306406157", "316148410X", "9798886451740"],
            ),
            (
                ["9798886451740", "9783161484100", "0439023483", "9780439023481"],
                ["0439023483", "9780439023481", "9783161484100", "9798886451740"],
            ),
            (
                ["9783161484100", "0439023483", "9798886451740", "9780439023481"],
                ["0439023483", "9780439023481", "9783161484100", "9798886451740"],
            ),
        ],
    )
    def test_sort_orders_by_canonical_form(self, unsorted, expected):
        """key / cmp_to_key / 기본 정렬이 같은 결과"""
        isbns = [Isbn10(v) if len(v) == 10 else Isbn13(v) for v in unsorted]

        by_key = [i.value for i in sorted(isbns, key=comparator().key)]
        by_cmp = [i.value for i in sorted(isbns, key=functools.cmp_to_key(comparator()))]
        natural = [i.value for i in sorted(isbns)]

        assert by_key == expected
        assert by_cmp == expected
        assert natural == expected

    def test_rich_comparisons(self):
        isbn10 = Isbn10("0439023483")
        isbn13 = Isbn13("9780439023481")
        later = Isbn13("9798886451740")

        assert isbn10 <= isbn13 and isbn10 >= isbn13
        assert not isbn10 < isbn13
        assert isbn13 < later and later > isbn10

    def test_comparison_with_non_isbn_raises_type_error(self):
        with pytest.raises(TypeError):
            Isbn10("0439023483") < "9780439023481"


class _ForeignIsbn(Isbn):
    """Isbn10/Isbn13이 아닌 하위 클래스"""

    value = "9780306406157"

    @property
    def version(self) -> Version:
        return Version.ISBN_13

    def can_convert_to(self, target):
        return False

    def to_isbn13(self):
        return None

    def to_isbn10(self):
        return None


class TestComparatorFailures:
    """내부 불변식 위반"""

    def test_unknown_subtype_raises_type_error(self):
        with pytest.raises(TypeError):
            comparator().compare(_ForeignIsbn(), Isbn13("9780306406157"))

    def test_failed_promotion_raises_consistency_error(self, monkeypatch, isbn_log_records):
        """ISBN-10 승격 실패는 치명적 오류로 처리"""
        isbn10 = Isbn10("0306406152")
        monkeypatch.setattr(Isbn10, "to_isbn13", lambda self: None)

        with pytest.raises(IsbnConsistencyError):
            comparator().compare(isbn10, Isbn13("9780306406157"))

        records = isbn_log_records("invariant_violation")
        assert len(records) == 1
        assert records[0].levelname == "ERROR"
