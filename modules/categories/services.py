"""
Categories business logic services.
"""
import logging
from collections import defaultdict
from typing import List, Optional, Dict, Any

from django.db import IntegrityError, transaction
from django.utils import timezone

from shared.exceptions import ValidationError
from shared.cache import CATEGORY_FLAT, CATEGORY_TREE, projection_cache
from shared.scope import is_mutable
from shared.utils import is_unique_violation, normalize_name, same_name
from modules.assets.linkage import AssetLinkageService

from .models import CategoryModel
from .exceptions import (
    CategoryNotFoundError,
    CategoryAlreadyExistsError,
    InvalidCategoryHierarchyError,
    DefaultCategoryError,
    CategoryHasChildrenError,
    CategoryInUseError,
)
from .serializers import CategorySerializer, CategoryTreeSerializer

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Service for the two-level category tree.

    Every read is scoped to the rows the acting user can see (system rows
    plus their own). Writes only ever touch rows the user owns.
    """

    def __init__(self, cache=None, linkage: AssetLinkageService = None):
        self.cache = cache or projection_cache
        self.linkage = linkage or AssetLinkageService()

    def _visible(self, user_id):
        return CategoryModel.objects.visible_to(user_id).select_related('parent')

    # === Reads ===

    def get_category_tree(self, user_id) -> List[Dict[str, Any]]:
        """Visible top-level categories, each with its visible children."""
        cached = self.cache.get(user_id, CATEGORY_TREE)
        if cached is not None:
            return cached

        parents = []
        children = defaultdict(list)
        for category in self._visible(user_id).default_first():
            if category.parent_id is None:
                parents.append(category)
            else:
                children[category.parent_id].append(category)

        tree = CategoryTreeSerializer(
            parents, many=True, context={'children': children}
        ).data
        self.cache.put(user_id, CATEGORY_TREE, tree)
        return tree

    def get_category_flat(self, user_id) -> List[Dict[str, Any]]:
        """Every visible category with its full path and level."""
        cached = self.cache.get(user_id, CATEGORY_FLAT)
        if cached is not None:
            return cached

        categories = self._visible(user_id).default_first()
        flat = CategorySerializer(categories, many=True).data
        self.cache.put(user_id, CATEGORY_FLAT, flat)
        return flat

    def get_parent_categories(self, user_id) -> List[CategoryModel]:
        return list(
            self._visible(user_id)
            .filter(parent__isnull=True)
            .default_first()
        )

    def get_child_categories(self, parent_id, user_id) -> List[CategoryModel]:
        parent = self.get_category_by_id(user_id, parent_id)
        return list(
            self._visible(user_id)
            .filter(parent=parent)
            .default_first()
        )

    def get_category_by_id(self, user_id, category_id) -> CategoryModel:
        """Get a visible category. Missing and foreign rows are both NotFound."""
        category = self._visible(user_id).get_visible(category_id, user_id)
        if category is None:
            raise CategoryNotFoundError(category_id=category_id)
        return category

    def get_category_assets(self, user_id, category_id):
        """Category plus the user's assets filed under it."""
        category = self.get_category_by_id(user_id, category_id)
        return category, self.linkage.list_by_category(category.id, user_id)

    # === Writes ===

    @transaction.atomic
    def create_category(
        self,
        user_id,
        name: str,
        parent_id=None,
    ) -> CategoryModel:
        """Create a custom category for the user."""
        name = self._clean_name(name)
        parent = self._resolve_parent(user_id, parent_id) if parent_id else None

        if self._name_taken(user_id, name, parent):
            raise CategoryAlreadyExistsError(name=name)

        category = CategoryModel(
            name=name,
            parent=parent,
            owner_id=user_id,
            is_default=False,
        )
        self._save(category)

        logger.info(f"Created category: {category.name} ({category.id}) for user {user_id}")
        self._invalidate(user_id)
        return category

    @transaction.atomic
    def update_category(
        self,
        user_id,
        category_id,
        name: str,
        parent_id=None,
    ) -> CategoryModel:
        """
        Replace a category's name and parent.

        An empty parent_id moves the category to the top level.
        """
        category = self._get_mutable(user_id, category_id, action='update')

        name = self._clean_name(name)
        parent = None
        if parent_id:
            parent = self._resolve_parent(user_id, parent_id, child=category)
            if CategoryModel.objects.filter(parent=category).exists():
                raise InvalidCategoryHierarchyError(
                    "Category with subcategories cannot be moved under a parent"
                )

        new_parent_id = parent.id if parent else None
        if not same_name(name, category.name) or new_parent_id != category.parent_id:
            if self._name_taken(user_id, name, parent, exclude_id=category.id):
                raise CategoryAlreadyExistsError(name=name)

        category.name = name
        category.parent = parent
        self._save(category)

        logger.info(f"Updated category: {category.name} ({category.id})")
        self._invalidate(user_id)
        return category

    @transaction.atomic
    def delete_category(self, user_id, category_id) -> bool:
        """Soft delete a category the user owns."""
        category = self._get_mutable(user_id, category_id, action='delete')

        if CategoryModel.objects.filter(parent=category).exists():
            raise CategoryHasChildrenError(category.id)

        asset_count = self.linkage.count_by_category(category.id, user_id)
        if asset_count:
            raise CategoryInUseError(category.id, asset_count)

        category.deleted_at = timezone.now()
        category.save(update_fields=['deleted_at', 'updated_at'])

        logger.info(f"Deleted category: {category.id}")
        self._invalidate(user_id)
        return True

    # === Helpers ===

    @staticmethod
    def _clean_name(name: str) -> str:
        name = normalize_name(name)
        if not name:
            raise ValidationError("Category name is required", field='name')
        return name

    def _resolve_parent(self, user_id, parent_id, child: CategoryModel = None) -> CategoryModel:
        parent = self._visible(user_id).get_visible(parent_id, user_id)
        if parent is None:
            raise CategoryNotFoundError(category_id=parent_id, entity_name='Parent category')
        if child is not None and parent.id == child.id:
            raise InvalidCategoryHierarchyError("Category cannot be its own parent")
        if parent.parent_id is not None:
            raise InvalidCategoryHierarchyError(
                "Parent must be a top-level category"
            )
        return parent

    def _get_mutable(self, user_id, category_id, action: str) -> CategoryModel:
        category = self.get_category_by_id(user_id, category_id)
        if category.is_default or not is_mutable(category, user_id):
            raise DefaultCategoryError(action=action)
        return category

    def _name_taken(
        self,
        user_id,
        name: str,
        parent: Optional[CategoryModel],
        exclude_id=None,
    ) -> bool:
        queryset = CategoryModel.objects.visible_to(user_id).with_name(name).filter(parent=parent)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def _save(self, category: CategoryModel) -> None:
        # The partial unique indexes settle races the pre-check cannot see.
        try:
            with transaction.atomic():
                category.save()
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            raise CategoryAlreadyExistsError(name=category.name)

    def _invalidate(self, user_id) -> None:
        self.cache.invalidate_on_commit(user_id, CATEGORY_TREE, CATEGORY_FLAT)
