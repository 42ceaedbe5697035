"""
Category browsing use cases.
"""
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO


@dataclass
class ListCategoriesUseCase(UseCase[Optional[UUID], List[CategoryDTO]]):
    """Active subcategories of a parent, or the active roots when no parent is given."""

    category_repository: CategoryRepository

    def execute(self, parent_id: Optional[UUID] = None) -> UseCaseResult[List[CategoryDTO]]:
        if parent_id is not None and self.category_repository.find_by_id(parent_id) is None:
            raise CategoryNotFoundError(str(parent_id))
        children = self.category_repository.find_children(parent_id=parent_id)
        return UseCaseResult.ok([CategoryDTO.from_entity(c) for c in children])


@dataclass
class GetCategoryPathUseCase(UseCase[UUID, List[CategoryDTO]]):
    """Breadcrumb from the root down to the category itself."""

    category_repository: CategoryRepository

    def execute(self, category_id: UUID) -> UseCaseResult[List[CategoryDTO]]:
        category = self.category_repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(str(category_id))

        path = [category]
        seen = {category.id}
        while path[-1].parent_id is not None and path[-1].parent_id not in seen:
            parent = self.category_repository.find_by_id(path[-1].parent_id)
            if parent is None:
                break
            seen.add(parent.id)
            path.append(parent)
        return UseCaseResult.ok([CategoryDTO.from_entity(c) for c in reversed(path)])
