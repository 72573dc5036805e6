"""Tests for parsing product specs and building products from them."""

import pytest

from foodpos.application.build_product import BuildProductHandler
from foodpos.application.dto import ProductSpec
from foodpos.domain.exceptions import UnknownVariant, ValidationError
from foodpos.domain.model.catalog import DEFAULT_CATALOG
from foodpos.domain.model.product import Burger, Drink, Salad


class TestProductSpecParse:

    def test_burger(self):
        assert ProductSpec.parse("burger:big:cheese") == ProductSpec("burger", ("big", "cheese"))

    def test_drink_is_case_insensitive_on_kind(self):
        assert ProductSpec.parse(" Drink : cola ") == ProductSpec("drink", ("cola",))

    def test_salad_with_weight(self):
        assert ProductSpec.parse("salad:caesar:150") == ProductSpec("salad", ("caesar",), 150.0)

    def test_salad_without_weight(self):
        assert ProductSpec.parse("salad:olivier") == ProductSpec("salad", ("olivier",), None)

    @pytest.mark.parametrize("raw", ["burger", "", "drink:", ":cola", "burger::cheese"])
    def test_malformed_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid product"):
            ProductSpec.parse(raw)

    def test_bad_salad_weight_rejected(self):
        with pytest.raises(ValidationError, match="Invalid salad weight"):
            ProductSpec.parse("salad:caesar:lots")


class TestBuildProductHandler:

    def _handler(self) -> BuildProductHandler:
        return BuildProductHandler(DEFAULT_CATALOG)

    def test_builds_burger(self):
        product = self._handler().handle(ProductSpec.parse("burger:big:cheese"))
        assert isinstance(product, Burger)
        assert product.energy == 60

    def test_builds_drink(self):
        product = self._handler().handle(ProductSpec.parse("drink:coffee"))
        assert isinstance(product, Drink)
        assert product.price == 80

    def test_builds_weighted_salad(self):
        product = self._handler().handle(ProductSpec.parse("salad:caesar:50"))
        assert isinstance(product, Salad)
        assert product.weight == 50
        assert product.energy == 10

    def test_unknown_kind(self):
        with pytest.raises(UnknownVariant) as exc_info:
            self._handler().handle(ProductSpec.parse("pizza:margherita"))
        assert exc_info.value.category == "product"
        assert exc_info.value.key == "pizza"

    def test_unknown_variant_propagates(self):
        with pytest.raises(UnknownVariant, match="drink_type"):
            self._handler().handle(ProductSpec.parse("drink:tea"))

    def test_wrong_variant_count(self):
        with pytest.raises(ValidationError, match="takes 2 variant"):
            self._handler().handle(ProductSpec.parse("burger:big"))
