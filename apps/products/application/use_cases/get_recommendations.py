"""
Get product recommendations use case.
"""
import logging
from dataclasses import dataclass, field
from typing import List
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import ProductNotFoundError
from ...domain.repositories.product_repository import ProductRepository
from ...domain.services.recommendation_generator import RecommendationGenerator
from ..dtos.product_dto import RecommendationDTO

logger = logging.getLogger(__name__)

MAX_LIMIT = 20


@dataclass
class GetRecommendationsDTO:
    product_id: UUID
    limit: int = 6


@dataclass
class GetRecommendationsUseCase(UseCase[GetRecommendationsDTO, List[RecommendationDTO]]):
    """Ordered recommendations for a product; an empty list is a normal result."""

    product_repository: ProductRepository
    generator: RecommendationGenerator = field(default_factory=RecommendationGenerator)

    def execute(self, input_dto: GetRecommendationsDTO) -> UseCaseResult[List[RecommendationDTO]]:
        source = self.product_repository.find_by_id(input_dto.product_id)
        if source is None:
            raise ProductNotFoundError(str(input_dto.product_id))

        limit = max(0, min(input_dto.limit, MAX_LIMIT))
        band = self.generator.PRICE_BAND
        candidates = self.product_repository.find_recommendation_candidates(
            category_id=source.category_id,
            brand=source.brand,
            min_price=source.price * (1 - band),
            max_price=source.price * (1 + band),
        )
        recommendations = self.generator.generate(source, candidates, limit=limit)
        if not recommendations:
            logger.info(f"No recommendations available for product {source.id}")
        return UseCaseResult.ok([RecommendationDTO.from_recommendation(r) for r in recommendations])
