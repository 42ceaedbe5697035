# Domain services
from .recommendation_generator import (
    Recommendation,
    RecommendationGenerator,
    RecommendationType,
)

__all__ = ['Recommendation', 'RecommendationGenerator', 'RecommendationType']
