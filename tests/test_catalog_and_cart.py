"""
Tests for product pricing, categories, recommendations and the cart aggregate.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders.application.dtos import AddToCartDTO, UpdateCartItemDTO
from apps.orders.application.use_cases import AddToCartUseCase, UpdateCartItemUseCase
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.exceptions import CartItemNotFoundError
from apps.orders.domain.value_objects import ProductSnapshot
from apps.products.application.use_cases import (
    CreateCategoryDTO,
    CreateCategoryUseCase,
    CreateProductDTO,
    CreateProductUseCase,
    GetCategoryPathUseCase,
    ListCategoriesUseCase,
)
from apps.products.application.use_cases.get_recommendations import (
    GetRecommendationsDTO,
    GetRecommendationsUseCase,
)
from apps.products.domain.entities.category import Category, slugify
from apps.products.domain.exceptions import (
    CategoryNotFoundError,
    InvalidCategoryError,
    InsufficientStockError,
    InvalidDimensionError,
    InvalidProductError,
    InvalidSKUError,
    ProductNotFoundError,
    ProductUnavailableError,
)
from apps.products.domain.services.recommendation_generator import (
    RecommendationGenerator,
    RecommendationType,
)
from shared.domain import ValidationError
from tests.builders import make_product, make_snapshot, make_variable_product
from tests.fakes import InMemoryCartRepository, InMemoryCategoryRepository, InMemoryProductRepository


class TestProductPricing:

    def test_tax_amount_and_price(self):
        product = make_product(base_amount='19.99', tax_rate='8')

        assert product.tax_amount == Decimal('1.60')
        assert product.price == Decimal('21.59')

    def test_sku_is_normalized(self):
        assert make_product(sku='tb-100').sku.value == 'TB-100'

    def test_invalid_sku(self):
        with pytest.raises(InvalidSKUError):
            make_product(sku='!')

    def test_price_for_length(self):
        product = make_variable_product(fixed_height='2', rate='1.25', max_length='10')

        assert product.price_for_length(Decimal('3.5')) == Decimal('8.75')

    @pytest.mark.parametrize('length', [None, '0', '-1', '10.01'])
    def test_invalid_lengths(self, length):
        product = make_variable_product(max_length='10')

        with pytest.raises(InvalidDimensionError):
            product.validate_custom_length(Decimal(length) if length is not None else None)

    def test_reserve_and_release_stock(self):
        product = make_product(stock=3)

        product.reserve_stock(2)
        assert product.stock.quantity == 1

        with pytest.raises(InsufficientStockError):
            product.reserve_stock(2)

        product.release_stock(2)
        assert product.stock.quantity == 3

    def test_stock_changes_are_recorded(self):
        product = make_product(stock=3)
        product.pull_events()

        product.reserve_stock(2)
        product.release_stock(1)

        assert [(e.delta, e.on_hand) for e in product.pull_events()] == [(-2, 1), (1, 2)]
        assert product.pending_events == ()

    def test_update_price_components(self):
        product = make_product(base_amount='10.00', tax_rate='8')
        product.pull_events()

        product.update_price_components(Decimal('20.00'), Decimal('5'))

        assert product.price == Decimal('21.00')
        (event,) = product.pull_events()
        assert event.event_type == 'ProductPriceUpdated'
        assert event.payload()['price'] == Decimal('21.00')

    def test_negative_price_components(self):
        with pytest.raises(InvalidProductError):
            make_product().update_price_components(Decimal('-1'), Decimal('8'))


class TestCreateProduct:

    def test_fixed_price_product(self):
        products = InMemoryProductRepository()
        dto = CreateProductDTO(
            name='Teak Board',
            sku='tb-100',
            stock_quantity=5,
            category_id=uuid4(),
            base_amount=Decimal('19.99'),
            tax_rate=Decimal('8'),
        )

        result = CreateProductUseCase(product_repository=products).execute(dto)

        assert result.data.sku == 'TB-100'
        assert result.data.price == Decimal('21.59')
        assert products.find_by_id(result.data.id) is not None
        assert [e.event_type for e in result.events] == ['ProductCreated']

    def test_variable_dimension_product(self):
        dto = CreateProductDTO(
            name='Glass Panel',
            sku='GP-200',
            stock_quantity=5,
            category_id=uuid4(),
            is_variable_dimension=True,
            fixed_height=Decimal('2'),
            variable_dimension_rate=Decimal('1.25'),
            dimension_unit='FOOT',
        )

        result = CreateProductUseCase(product_repository=InMemoryProductRepository()).execute(dto)

        assert result.data.is_variable_dimension
        assert result.events[0].payload()['is_variable_dimension'] is True

    def test_negative_stock(self):
        dto = CreateProductDTO(
            name='Teak Board',
            sku='TB-100',
            stock_quantity=-1,
            category_id=uuid4(),
            base_amount=Decimal('10.00'),
        )

        with pytest.raises(ValidationError):
            CreateProductUseCase(product_repository=InMemoryProductRepository()).execute(dto)


class TestCategories:

    @pytest.fixture
    def categories(self):
        return InMemoryCategoryRepository()

    def create(self, categories, name, **kwargs):
        dto = CreateCategoryDTO(name=name, **kwargs)
        return CreateCategoryUseCase(category_repository=categories).execute(dto)

    def test_slugify(self):
        assert slugify('  Garden & Outdoor  Tools ') == 'garden-outdoor-tools'
        assert slugify('--Doors--') == 'doors'

    def test_invalid_category(self):
        with pytest.raises(InvalidCategoryError):
            Category.create(name='A')
        with pytest.raises(InvalidCategoryError):
            Category.create(name='Doors', slug='doors and windows')

    def test_create_derives_slug_and_records_event(self, categories):
        result = self.create(categories, 'Glass Panels')

        assert result.data.slug == 'glass-panels'
        assert result.data.parent_id is None
        assert [e.event_type for e in result.events] == ['CategoryCreated']
        assert categories.find_by_slug('glass-panels') is not None

    def test_duplicate_slug(self, categories):
        self.create(categories, 'Glass Panels')

        with pytest.raises(InvalidCategoryError) as exc:
            self.create(categories, 'Panels', slug='glass-panels')
        assert exc.value.field == 'slug'

    def test_parent_must_exist(self, categories):
        with pytest.raises(CategoryNotFoundError):
            self.create(categories, 'Shower Doors', parent_id=uuid4())

    def test_list_roots_and_children(self, categories):
        glass = self.create(categories, 'Glass').data
        self.create(categories, 'Wood')
        self.create(categories, 'Mirrors', parent_id=glass.id, sort_order=2)
        self.create(categories, 'Tempered', parent_id=glass.id, sort_order=1)
        hidden = Category.create(name='Retired', parent_id=glass.id)
        hidden.is_active = False
        categories.save(hidden)

        use_case = ListCategoriesUseCase(category_repository=categories)

        assert [c.name for c in use_case.execute().data] == ['Glass', 'Wood']
        assert [c.name for c in use_case.execute(glass.id).data] == ['Tempered', 'Mirrors']
        with pytest.raises(CategoryNotFoundError):
            use_case.execute(uuid4())

    def test_path_runs_from_root(self, categories):
        glass = self.create(categories, 'Glass').data
        panels = self.create(categories, 'Panels', parent_id=glass.id).data
        frosted = self.create(categories, 'Frosted', parent_id=panels.id).data

        path = GetCategoryPathUseCase(category_repository=categories).execute(frosted.id).data

        assert [c.slug for c in path] == ['glass', 'panels', 'frosted']

    def test_path_of_unknown_category(self, categories):
        with pytest.raises(CategoryNotFoundError):
            GetCategoryPathUseCase(category_repository=categories).execute(uuid4())


class TestRecommendations:

    def test_rules_and_ranking(self):
        category = uuid4()
        source = make_product(name='Oak Shelf', sku='OS-1', category_id=category, brand='Acme')
        same_category = make_product(name='Pine Shelf', sku='PS-1', base_amount='99', category_id=category)
        same_brand = make_product(name='Acme Hook', sku='AH-1', base_amount='99', brand='Acme')
        similar_price = make_product(name='Lamp', sku='LA-1', base_amount='10.50')
        unrelated = make_product(name='Sofa', sku='SO-1', base_amount='500')

        result = RecommendationGenerator().generate(
            source, [source, same_category, same_brand, similar_price, unrelated]
        )

        assert [r.product.id for r in result] == [same_category.id, same_brand.id, similar_price.id]
        assert [r.type for r in result] == [
            RecommendationType.CATEGORY_RELATED,
            RecommendationType.BRAND_RELATED,
            RecommendationType.PRICE_SIMILAR,
        ]

    def test_product_matching_several_rules_keeps_first(self):
        category = uuid4()
        source = make_product(name='Oak Shelf', sku='OS-1', category_id=category, brand='Acme')
        twin = make_product(name='Oak Shelf II', sku='OS-2', category_id=category, brand='Acme')

        result = RecommendationGenerator().generate(source, [twin])

        assert len(result) == 1
        assert result[0].score == Decimal('0.8')

    def test_skips_unpurchasable_products(self):
        category = uuid4()
        source = make_product(sku='OS-1', category_id=category)
        sold_out = make_product(sku='OS-2', category_id=category, stock=0)
        inactive = make_product(sku='OS-3', category_id=category)
        inactive.deactivate()

        assert RecommendationGenerator().generate(source, [sold_out, inactive]) == []

    def test_use_case_limits_and_reports_missing_product(self):
        category = uuid4()
        source = make_product(sku='OS-1', category_id=category)
        others = [make_product(sku=f'OS-{i}', category_id=category) for i in range(2, 9)]
        use_case = GetRecommendationsUseCase(product_repository=InMemoryProductRepository([source, *others]))

        result = use_case.execute(GetRecommendationsDTO(product_id=source.id, limit=3))

        assert len(result.data) == 3
        with pytest.raises(ProductNotFoundError):
            use_case.execute(GetRecommendationsDTO(product_id=uuid4()))


class TestCart:

    def test_same_product_lines_merge(self):
        cart = Cart.create('user-1')
        snapshot = make_snapshot()

        cart.add_item(snapshot, 1)
        cart.add_item(snapshot, 2)

        assert len(cart.items) == 1
        assert cart.item_count == 3

    def test_variable_lines_merge_only_on_equal_length(self):
        product = make_variable_product()
        snapshot = ProductSnapshot.from_product(product)
        cart = Cart.create('user-1')

        cart.add_item(snapshot, 1, Decimal('3'))
        cart.add_item(snapshot, 1, Decimal('3.00'))
        cart.add_item(snapshot, 1, Decimal('4'))

        assert [(item.custom_length, item.quantity) for item in cart.items] == [
            (Decimal('3'), 2),
            (Decimal('4'), 1),
        ]

    def test_changing_length_onto_existing_line_merges(self):
        snapshot = ProductSnapshot.from_product(make_variable_product())
        cart = Cart.create('user-1')
        first = cart.add_item(snapshot, 1, Decimal('3'))
        cart.add_item(snapshot, 2, Decimal('4'))

        merged = cart.update_item_dimension(first.id, Decimal('4'))

        assert len(cart.items) == 1
        assert merged.quantity == 3

    def test_fixed_line_rejects_custom_length(self):
        with pytest.raises(ValidationError):
            Cart.create('user-1').add_item(make_snapshot(), 1, Decimal('2'))

    @pytest.mark.parametrize("quantity", [True, False])
    def test_bool_quantity_is_rejected(self, quantity):
        cart = Cart.create('user-1')
        with pytest.raises(ValidationError):
            cart.add_item(make_snapshot(), quantity)

        item = cart.add_item(make_snapshot(), 2)
        with pytest.raises(ValidationError):
            cart.update_item_quantity(item.id, quantity)
        assert cart.items[0].quantity == 2

    def test_zero_quantity_removes_line(self):
        cart = Cart.create('user-1')
        item = cart.add_item(make_snapshot(), 2)

        cart.update_item_quantity(item.id, 0)

        assert cart.is_empty

    def test_unknown_line(self):
        with pytest.raises(CartItemNotFoundError):
            Cart.create('user-1').remove_item(uuid4())

    def test_line_amounts(self):
        cart = Cart.create('user-1')
        item = cart.add_item(make_snapshot('10.00', '0.80'), 3)

        assert item.unit_price == Decimal('10.80')
        assert item.line_subtotal == Decimal('30.00')
        assert item.line_total == Decimal('32.40')


class TestCartUseCases:

    @pytest.fixture
    def products(self):
        return InMemoryProductRepository()

    @pytest.fixture
    def carts(self):
        return InMemoryCartRepository()

    def add(self, carts, products, product_id, quantity=1, custom_length=None):
        use_case = AddToCartUseCase(cart_repository=carts, product_repository=products)
        return use_case.execute(
            AddToCartDTO(user_id='user-1', product_id=product_id, quantity=quantity, custom_length=custom_length)
        ).data

    def test_add_returns_cart_with_totals(self, carts, products):
        product = products.save(make_product(base_amount='10.00', tax_rate='8'))

        cart = self.add(carts, products, product.id, quantity=2)

        assert cart.items[0].unit_tax_amount == Decimal('0.80')
        assert cart.totals.total_amount == Decimal('31.59')

    def test_add_checks_stock_across_lines(self, carts, products):
        product = products.save(make_product(stock=3))
        self.add(carts, products, product.id, quantity=2)

        with pytest.raises(InsufficientStockError):
            self.add(carts, products, product.id, quantity=2)

    def test_add_inactive_product(self, carts, products):
        product = make_product()
        product.deactivate()
        products.save(product)

        with pytest.raises(ProductUnavailableError):
            self.add(carts, products, product.id)

    def test_add_unknown_product(self, carts, products):
        with pytest.raises(ProductNotFoundError):
            self.add(carts, products, uuid4())

    def test_variable_product_needs_length(self, carts, products):
        product = products.save(make_variable_product())

        with pytest.raises(InvalidDimensionError):
            self.add(carts, products, product.id)

        cart = self.add(carts, products, product.id, custom_length=Decimal('3.5'))
        assert cart.items[0].unit_price == Decimal('8.75')

    def test_update_quantity(self, carts, products):
        product = products.save(make_product())
        cart = self.add(carts, products, product.id)
        use_case = UpdateCartItemUseCase(cart_repository=carts, product_repository=products)

        updated = use_case.execute(UpdateCartItemDTO(user_id='user-1', item_id=cart.items[0].id, quantity=4)).data

        assert updated.items[0].quantity == 4
