"""
Catalog endpoints: browsing is public, adding products or categories needs a login.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....domain.exceptions import CategoryNotFoundError, ProductNotFoundError
from ....application.dtos.category_dto import CategoryDTO
from ....application.dtos.product_dto import ProductDTO
from ....application.use_cases import (
    CreateCategoryDTO,
    CreateCategoryUseCase,
    GetCategoryPathUseCase,
    ListCategoriesUseCase,
    CreateProductDTO,
    CreateProductUseCase,
    GetRecommendationsDTO,
    GetRecommendationsUseCase,
)
from ....infrastructure.repositories import DjangoCategoryRepository, DjangoProductRepository
from ...serializers import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryListQuerySerializer,
    ProductSerializer,
    ProductCreateSerializer,
    ProductListQuerySerializer,
    RecommendationQuerySerializer,
    RecommendationSerializer,
)


def _query(serializer_class, request):
    serializer = serializer_class(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


@extend_schema(tags=['Products'])
class ProductListCreateView(APIView):

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[ProductListQuerySerializer],
        responses={200: ProductSerializer(many=True)},
        summary="List active products, newest first",
    )
    def get(self, request):
        products = DjangoProductRepository().find_all(**_query(ProductListQuerySerializer, request))
        return Response(ProductSerializer([ProductDTO.from_entity(p) for p in products], many=True).data)

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
        summary="Create a fixed-price or variable-dimension product",
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CreateProductUseCase(product_repository=DjangoProductRepository())
        result = use_case.execute(CreateProductDTO(**serializer.validated_data))
        return Response(ProductSerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: ProductSerializer}, summary="Get a product")
    def get(self, request, product_id: UUID):
        product = DjangoProductRepository().find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(str(product_id))
        return Response(ProductSerializer(ProductDTO.from_entity(product)).data)


@extend_schema(tags=['Products'])
class ProductRecommendationsView(APIView):
    """Related products for a product page."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[RecommendationQuerySerializer],
        responses={200: RecommendationSerializer(many=True)},
        summary="Get product recommendations",
    )
    def get(self, request, product_id: UUID):
        limit = _query(RecommendationQuerySerializer, request)['limit']
        use_case = GetRecommendationsUseCase(product_repository=DjangoProductRepository())
        result = use_case.execute(GetRecommendationsDTO(product_id=product_id, limit=limit))
        return Response(RecommendationSerializer(result.data, many=True).data)


@extend_schema(tags=['Categories'])
class CategoryListCreateView(APIView):

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[CategoryListQuerySerializer],
        responses={200: CategorySerializer(many=True)},
        summary="List root categories, or the subcategories of parent_id",
    )
    def get(self, request):
        parent_id = _query(CategoryListQuerySerializer, request)['parent_id']
        result = ListCategoriesUseCase(category_repository=DjangoCategoryRepository()).execute(parent_id)
        return Response(CategorySerializer(result.data, many=True).data)

    @extend_schema(
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CreateCategoryUseCase(category_repository=DjangoCategoryRepository())
        result = use_case.execute(CreateCategoryDTO(**serializer.validated_data))
        return Response(CategorySerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryDetailView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: CategorySerializer}, summary="Get a category")
    def get(self, request, category_id: UUID):
        category = DjangoCategoryRepository().find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(str(category_id))
        return Response(CategorySerializer(CategoryDTO.from_entity(category)).data)


@extend_schema(tags=['Categories'])
class CategoryBySlugView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: CategorySerializer}, summary="Get a category by slug")
    def get(self, request, slug: str):
        category = DjangoCategoryRepository().find_by_slug(slug)
        if category is None:
            raise CategoryNotFoundError(slug)
        return Response(CategorySerializer(CategoryDTO.from_entity(category)).data)


@extend_schema(tags=['Categories'])
class CategoryPathView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: CategorySerializer(many=True)}, summary="Breadcrumb from the root category")
    def get(self, request, category_id: UUID):
        result = GetCategoryPathUseCase(category_repository=DjangoCategoryRepository()).execute(category_id)
        return Response(CategorySerializer(result.data, many=True).data)
