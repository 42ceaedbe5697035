"""
Recommendation generation.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, List

from ..entities.product import Product

logger = logging.getLogger(__name__)


class RecommendationType(str, Enum):
    CATEGORY_RELATED = 'CATEGORY_RELATED'
    BRAND_RELATED = 'BRAND_RELATED'
    PRICE_SIMILAR = 'PRICE_SIMILAR'


@dataclass(frozen=True)
class Recommendation:
    """A recommended product with the rule that produced it."""
    product: Product
    type: RecommendationType
    score: Decimal
    reason: str


class RecommendationGenerator:
    """
    Builds "you may also like" lists from a pool of candidate products.

    Rules, applied in order:
    same category (up to 5, score 0.8), same brand (up to 3, score 0.7),
    price within +/-20% (up to 3, score 0.6). A product picked by an
    earlier rule keeps that rule's score and reason.
    """
    CATEGORY_LIMIT = 5
    BRAND_LIMIT = 3
    PRICE_LIMIT = 3
    CATEGORY_SCORE = Decimal('0.8')
    BRAND_SCORE = Decimal('0.7')
    PRICE_SCORE = Decimal('0.6')
    PRICE_BAND = Decimal('0.2')

    def generate(
        self,
        source: Product,
        candidates: Iterable[Product],
        limit: int = 6,
    ) -> List[Recommendation]:
        pool = [
            p for p in candidates
            if p.id != source.id and p.is_purchasable
        ]
        picked: List[Recommendation] = []
        seen = set()

        def take(matches: List[Product], cap: int, rec_type: RecommendationType,
                 score: Decimal, reason: str) -> None:
            taken = 0
            for product in matches:
                if taken >= cap:
                    break
                taken += 1
                if product.id in seen:
                    continue
                seen.add(product.id)
                picked.append(Recommendation(product=product, type=rec_type, score=score, reason=reason))

        take(
            [p for p in pool if p.category_id == source.category_id],
            self.CATEGORY_LIMIT,
            RecommendationType.CATEGORY_RELATED,
            self.CATEGORY_SCORE,
            "Same category",
        )
        if source.brand:
            take(
                [p for p in pool if p.brand == source.brand],
                self.BRAND_LIMIT,
                RecommendationType.BRAND_RELATED,
                self.BRAND_SCORE,
                f"Same brand: {source.brand}",
            )
        low = source.price * (1 - self.PRICE_BAND)
        high = source.price * (1 + self.PRICE_BAND)
        take(
            [p for p in pool if low <= p.price <= high],
            self.PRICE_LIMIT,
            RecommendationType.PRICE_SIMILAR,
            self.PRICE_SCORE,
            "Similar price range",
        )

        # sorted() is stable, so ties keep discovery order
        ranked = sorted(picked, key=lambda r: r.score, reverse=True)[:max(limit, 0)]
        logger.debug(f"Generated {len(ranked)} recommendations for product {source.id}")
        return ranked
