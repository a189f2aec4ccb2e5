"""
Unit тесты моделей: Category, Purchase, Balance, Ledger.
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from budget_manager.models import Balance, Category, Ledger, Purchase
from budget_manager.utils.exceptions import UnknownCategoryError, ValidationError


class TestCategory:
    """Тесты перечисления категорий."""

    def test_declaration_order(self):
        assert [c.label for c in Category] == ["Food", "Clothes", "Entertainment", "Other"]

    @pytest.mark.parametrize("category", list(Category))
    def test_from_label_round_trip(self, category):
        assert Category.from_label(category.label) is category

    @pytest.mark.parametrize("label", ["food", "FOOD", "Food ", "", "Transport"])
    def test_unknown_label_raises(self, label):
        with pytest.raises(UnknownCategoryError) as exc_info:
            Category.from_label(label)
        assert exc_info.value.label == label

    def test_unknown_label_is_validation_and_value_error(self):
        with pytest.raises(ValidationError):
            Category.from_label("Cars")
        with pytest.raises(ValueError):
            Category.from_label("Cars")


class TestPurchase:
    """Тесты модели покупки."""

    def test_display_lines(self):
        purchase = Purchase(name="Bread", price=Decimal("3.5"), category=Category.FOOD)
        assert purchase.display_all() == "Bread $3.50"
        assert purchase.display(Category.FOOD) == "Bread $3.50"
        assert purchase.display(Category.CLOTHES) is None

    def test_to_line_uses_natural_price(self):
        assert Purchase(name="Shirt", price=Decimal("20"), category=Category.CLOTHES).to_line() == "Clothes;Shirt;20.0"
        assert Purchase(name="Bread", price=Decimal("3.50"), category=Category.FOOD).to_line() == "Food;Bread;3.5"

    def test_name_is_stripped(self):
        assert Purchase(name="  Milk  ", price=Decimal("1"), category=Category.FOOD).name == "Milk"

    def test_zero_price_allowed(self):
        assert Purchase(name="Gift", price=Decimal("0"), category=Category.OTHER).price == 0

    def test_negative_price_rejected(self):
        with pytest.raises(PydanticValidationError):
            Purchase(name="Refund", price=Decimal("-1"), category=Category.OTHER)

    @pytest.mark.parametrize("name", ["a;b", "line\nbreak", "car\rriage"])
    def test_name_breaking_file_format_rejected(self, name):
        with pytest.raises(PydanticValidationError):
            Purchase(name=name, price=Decimal("1"), category=Category.OTHER)

    def test_purchase_is_immutable(self):
        purchase = Purchase(name="Bread", price=Decimal("3.5"), category=Category.FOOD)
        with pytest.raises(PydanticValidationError):
            purchase.price = Decimal("1")

    def test_category_accepts_label(self):
        assert Purchase(name="Ticket", price=Decimal("5"), category="Entertainment").category is Category.ENTERTAINMENT


class TestBalance:
    """Тесты баланса."""

    def test_starts_at_zero(self):
        assert Balance().value == 0
        assert Balance().show() == "Balance: $0.00"

    def test_add_and_subtract(self):
        balance = Balance()
        balance.add(Decimal("100"))
        balance.subtract(Decimal("23.5"))
        assert balance.value == Decimal("76.5")
        assert balance.show() == "Balance: $76.50"

    def test_can_go_negative(self):
        balance = Balance()
        balance.subtract(Decimal("10"))
        assert balance.value == Decimal("-10")
        assert balance.show() == "Balance: $-10.00"

    def test_set_overwrites(self):
        balance = Balance(Decimal("5"))
        balance.set(Decimal("100"))
        assert balance.value == Decimal("100")

    def test_show_rounds_half_up(self):
        assert Balance(Decimal("0.125")).show() == "Balance: $0.13"


class TestLedger:
    """Тесты списка покупок."""

    def test_bread_and_shirt_scenario(self):
        ledger = Ledger()
        ledger.add_record(Category.FOOD, "Bread", Decimal("3.50"))
        ledger.add_record(Category.CLOTHES, "Shirt", Decimal("20"))

        assert ledger.total_price() == Decimal("23.50")
        assert ledger.total_price(Category.FOOD) == Decimal("3.50")
        assert ledger.count(Category.CLOTHES) == 1
        assert ledger.count() == 2

    def test_empty_totals(self):
        ledger = Ledger()
        assert ledger.total_price() == 0
        assert ledger.total_price(Category.OTHER) == 0
        assert ledger.count(Category.OTHER) == 0

    def test_show_all_empty(self):
        assert Ledger().show_all() == ["The purchase list is empty!"]

    def test_show_by_category_empty(self, sample_ledger):
        assert sample_ledger.show_by_category(Category.OTHER) == ["The purchase list is empty"]

    def test_show_by_category(self, sample_ledger):
        assert sample_ledger.show_by_category(Category.FOOD) == [
            "Food:",
            "Bread $3.50",
            "Milk $2.00",
            "Total sum: $5.5",
        ]

    def test_show_all(self, sample_ledger):
        assert sample_ledger.show_all() == [
            "All:",
            "Bread $3.50",
            "Shirt $20.00",
            "Milk $2.00",
            "Cinema $12.25",
            "Total: $37.75",
        ]

    def test_show_all_zero_total_prints_zero(self):
        ledger = Ledger()
        ledger.add_record(Category.OTHER, "Sample", Decimal("0"))
        assert ledger.show_all()[-1] == "Total: $0"

    def test_sort_by_price_descending(self, sample_ledger):
        sample_ledger.sort_by_price_descending()
        assert [p.name for p in sample_ledger] == ["Shirt", "Cinema", "Bread", "Milk"]

    def test_sort_is_stable_for_equal_prices(self):
        ledger = Ledger()
        ledger.add_record(Category.FOOD, "first", Decimal("5"))
        ledger.add_record(Category.OTHER, "cheap", Decimal("1"))
        ledger.add_record(Category.CLOTHES, "second", Decimal("5.00"))
        ledger.add_record(Category.FOOD, "third", Decimal("5"))

        ledger.sort_by_price_descending()

        assert [p.name for p in ledger] == ["first", "second", "third", "cheap"]

    def test_type_summary_food_only(self):
        ledger = Ledger()
        ledger.add_record(Category.FOOD, "Bread", Decimal("3.50"))
        ledger.add_record(Category.FOOD, "Milk", Decimal("1.20"))

        assert ledger.show_by_type_summary() == [
            "Types:",
            "Food - $4.7",
            "Clothes - $0",
            "Entertainment - $0",
            "Other - $0",
            "Total sum: $4.7",
        ]

    def test_type_summary_sorted_by_total(self, sample_ledger):
        assert sample_ledger.show_by_type_summary() == [
            "Types:",
            "Clothes - $20.0",
            "Entertainment - $12.25",
            "Food - $5.5",
            "Other - $0",
            "Total sum: $37.75",
        ]

    def test_type_summary_ties_follow_declaration_order(self):
        ledger = Ledger()
        ledger.add_record(Category.OTHER, "a", Decimal("10"))
        ledger.add_record(Category.CLOTHES, "b", Decimal("10"))
        ledger.add_record(Category.ENTERTAINMENT, "c", Decimal("4"))

        assert [c for c, _ in ledger.totals_by_category()] == [
            Category.CLOTHES, Category.OTHER, Category.ENTERTAINMENT, Category.FOOD,
        ]

    def test_type_summary_empty_ledger(self):
        assert Ledger().show_by_type_summary() == [
            "Types:",
            "Food - $0",
            "Clothes - $0",
            "Entertainment - $0",
            "Other - $0",
            "Total sum: $0",
        ]

    def test_purchases_is_snapshot(self, sample_ledger):
        snapshot = sample_ledger.purchases
        sample_ledger.add_record(Category.OTHER, "Pen", Decimal("1"))
        assert len(snapshot) == 4
        assert len(sample_ledger) == 5
