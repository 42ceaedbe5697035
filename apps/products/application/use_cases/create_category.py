"""
Create category use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.entities.category import Category
from ...domain.exceptions import CategoryNotFoundError, InvalidCategoryError
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryDTO:
    name: str
    slug: Optional[str] = None
    description: str = ""
    parent_id: Optional[UUID] = None
    sort_order: int = 0


@dataclass
class CreateCategoryUseCase(UseCase[CreateCategoryDTO, CategoryDTO]):
    """Add a root category or a subcategory under an existing parent."""

    category_repository: CategoryRepository

    def execute(self, input_dto: CreateCategoryDTO) -> UseCaseResult[CategoryDTO]:
        if input_dto.parent_id is not None and self.category_repository.find_by_id(input_dto.parent_id) is None:
            raise CategoryNotFoundError(str(input_dto.parent_id))

        category = Category.create(
            name=input_dto.name,
            slug=input_dto.slug,
            description=input_dto.description,
            parent_id=input_dto.parent_id,
            sort_order=input_dto.sort_order,
        )
        if self.category_repository.find_by_slug(category.slug) is not None:
            raise InvalidCategoryError(f"Category with slug '{category.slug}' already exists", field="slug")

        saved = self.category_repository.save(category)
        events = self.publish_events(category)
        logger.info(f"Category created: {saved.id} ({saved.slug})")
        return UseCaseResult.ok(CategoryDTO.from_entity(saved), events)
