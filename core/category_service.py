from core.api_client import ApiClient, fetch_all
from core.errors import ApiError
from models.category import Category

def get_all_categories(api: ApiClient):
    return fetch_all(api, "/categories", Category.from_dict)

def create_category(api: ApiClient, name: str, description: str = ""):
    """Returns (category or None, message)"""
    try:
        data = api.post("/categories", json={"name": name, "description": description})
        return Category.from_dict(data or {}), "Category created successfully"
    except ApiError as e:
        return None, e.message or "Failed to save category"

def update_category(api: ApiClient, category_id: str, name: str, description: str = ""):
    """Returns (success: bool, message: str)"""
    try:
        api.put(f"/categories/{category_id}", json={"name": name, "description": description})
        return True, "Category updated successfully"
    except ApiError as e:
        return False, e.message or "Failed to save category"

def delete_category(api: ApiClient, category_id: str):
    """Returns (success: bool, message: str)"""
    try:
        api.delete(f"/categories/{category_id}")
        return True, "Category deleted successfully"
    except ApiError as e:
        return False, e.message or "Failed to delete category"
