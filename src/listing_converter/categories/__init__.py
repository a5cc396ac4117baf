"""Category resolution (path -> id) and classification."""

from listing_converter.categories.base import CategoryResolver
from listing_converter.categories.classifier import CategoryClassifier, CategoryRules
from listing_converter.categories.index import CategoryIndex

__all__ = ["CategoryClassifier", "CategoryIndex", "CategoryResolver", "CategoryRules"]
