from .normalize import normalize_recipe, normalize_batch
from .merge import MergeResult, upsert_recipes, sort_collection
from .github_store import ContentStore, GitHubContentStore, StoredDocument
from .publisher import RecipePublisher

__all__ = ["normalize_recipe", "normalize_batch", "MergeResult", "upsert_recipes", "sort_collection", "ContentStore", "GitHubContentStore", "StoredDocument", "RecipePublisher"]
