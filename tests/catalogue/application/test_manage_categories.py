"""Application tests for category management."""

import pytest
from grocery.catalogue.category.category import Category
from grocery.catalogue.category.management import CreateCategory, DeleteCategory, UpdateCategory
from grocery.errors import CategoryNotFound, InvalidCategoryData
from protean import current_domain


def _create(name, parent_id=None):
    return current_domain.process(
        CreateCategory(name=name, parent_category_id=parent_id), asynchronous=False
    )


def _get(category_id):
    return current_domain.repository_for(Category).get(category_id)


class TestCreateCategory:
    def test_nested(self):
        produce = _create("Produce")
        fruit = _create("Fruit", produce)

        category = _get(fruit)
        assert category.level == 1
        assert category.path == "Produce/Fruit"

    def test_unknown_parent(self):
        with pytest.raises(CategoryNotFound):
            _create("Fruit", "no-such-category")

    def test_too_deep(self):
        parent = None
        for level in range(5):
            parent = _create(f"L{level}", parent)

        with pytest.raises(InvalidCategoryData):
            _create("L5", parent)


class TestUpdateCategory:
    def test_rename_cascades_to_descendants(self):
        produce = _create("Produce")
        fruit = _create("Fruit", produce)
        citrus = _create("Citrus", fruit)

        current_domain.process(UpdateCategory(category_id=produce, name="Fresh Produce"), asynchronous=False)

        assert _get(produce).path == "Fresh Produce"
        assert _get(fruit).path == "Fresh Produce/Fruit"
        assert _get(citrus).path == "Fresh Produce/Fruit/Citrus"

    def test_description_only_keeps_paths(self):
        produce = _create("Produce")
        fruit = _create("Fruit", produce)

        current_domain.process(
            UpdateCategory(category_id=produce, description="Fruit and vegetables"),
            asynchronous=False,
        )

        assert _get(produce).description == "Fruit and vegetables"
        assert _get(fruit).path == "Produce/Fruit"

    def test_unknown_category(self):
        with pytest.raises(CategoryNotFound):
            current_domain.process(UpdateCategory(category_id="missing", name="X"), asynchronous=False)


class TestDeleteCategory:
    def test_delete_leaf(self):
        produce = _create("Produce")

        current_domain.process(DeleteCategory(category_id=produce), asynchronous=False)

        assert not current_domain.repository_for(Category).exists(produce)

    def test_with_children(self):
        produce = _create("Produce")
        _create("Fruit", produce)

        with pytest.raises(InvalidCategoryData, match="subcategories"):
            current_domain.process(DeleteCategory(category_id=produce), asynchronous=False)

    def test_with_products(self, category_id, make_product):
        make_product()

        with pytest.raises(InvalidCategoryData, match="products"):
            current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)

    def test_unknown_category(self):
        with pytest.raises(CategoryNotFound):
            current_domain.process(DeleteCategory(category_id="missing"), asynchronous=False)
